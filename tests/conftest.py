"""Shared pytest fixtures."""

import pytest

from translation_sync.utils.logging import reset_logger


@pytest.fixture(autouse=True)
def fresh_logger():
    """Every test gets a logger bound to its own captured stdout."""
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def no_color(monkeypatch):
    monkeypatch.setenv('NO_COLOR', '1')
