"""Tests for structured logging system."""

import pytest
import logging
import sys
import tempfile
from pathlib import Path
from unittest.mock import Mock

from translation_sync.utils.logging import (
    Logger,
    ColoredFormatter,
    LOGGER_NAME,
    get_logger,
    configure_logging,
    reset_logger,
)
from translation_sync.utils.colors import Colors


def make_record(level=logging.INFO, msg='Test message'):
    return logging.LogRecord(
        name='test',
        level=level,
        pathname='',
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None
    )


class TestColoredFormatter:
    """Test cases for ColoredFormatter."""

    def test_format_without_colors(self):
        """Formatter without colors should return plain text."""
        formatter = ColoredFormatter(fmt='%(message)s', use_colors=False)
        result = formatter.format(make_record(logging.WARNING))
        assert result == 'Test message'

    def test_info_is_plain(self):
        """INFO carries no color so summaries read as normal output."""
        formatter = ColoredFormatter(fmt='%(message)s', use_colors=True)
        assert formatter.format(make_record(logging.INFO)) == 'Test message'

    def test_levels_have_colors(self):
        formatter = ColoredFormatter(fmt='%(message)s', use_colors=True)

        levels = [
            (logging.DEBUG, Colors.DIM),
            (logging.WARNING, Colors.WARNING),
            (logging.ERROR, Colors.FAIL),
        ]
        for level, color in levels:
            result = formatter.format(make_record(level))
            assert result.startswith(color)
            assert result.endswith(Colors.ENDC)


class TestLogger:
    """Test cases for Logger singleton."""

    def test_singleton(self):
        assert Logger() is Logger()
        assert get_logger() is get_logger()

    def test_default_level_is_info(self):
        assert get_logger().console_level == logging.INFO

    def test_verbose(self):
        configure_logging(verbose=True)
        assert get_logger().console_level == logging.DEBUG

    def test_quiet_wins_over_verbose(self):
        configure_logging(verbose=True, quiet=True)
        assert get_logger().console_level == logging.WARNING

    def test_quiet_hides_info(self, capsys):
        configure_logging(quiet=True, use_colors=False)
        log = get_logger()

        log.info("hidden")
        log.warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_helpers(self, capsys, no_color):
        configure_logging(use_colors=False)
        log = get_logger()

        log.success("Done")
        log.fail("Broken")
        log.hint("Try again")
        log.section("Summary")

        out = capsys.readouterr().out
        assert "✅ Done" in out
        assert "❌ Broken" in out
        assert "💡 Try again" in out
        assert "Summary\n" in out
        assert "=" * 60 in out

    def test_child_logger(self):
        child = get_logger().get_logger("scanner")
        assert child.name == f"{LOGGER_NAME}.scanner"
        assert get_logger().get_logger() is logging.getLogger(LOGGER_NAME)

    def test_log_file(self):
        """Log file receives debug output without ANSI codes."""
        with tempfile.TemporaryDirectory() as tmpdir:
            log_path = Path(tmpdir) / "logs" / "sync.log"
            configure_logging(log_file=log_path)
            log = get_logger()

            log.debug("per-file details")
            log.warning("careful")
            reset_logger()

            content = log_path.read_text(encoding="utf-8")
            assert "[DEBUG] translation_sync: per-file details" in content
            assert "[WARNING]" in content
            assert "\033[" not in content

    def test_reset(self):
        first = get_logger()
        reset_logger()
        assert get_logger() is not first


class TestColors:
    """Test cases for Colors."""

    def test_no_color_env(self, no_color):
        assert not Colors.enabled()
        assert Colors.success("ok") == "ok"

    def test_tty_enables_colors(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setattr(sys, "stdout", Mock(isatty=Mock(return_value=True)))

        assert Colors.enabled()
        assert Colors.error("x") == f"{Colors.FAIL}x{Colors.ENDC}"
