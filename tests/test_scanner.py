"""Tests for the tr() literal scanner."""

import pytest
from pathlib import Path

from translation_sync.core.scanner import LiteralScanner, ScanState, find_source_files
from translation_sync.utils.validators import is_valid_translation_key


@pytest.fixture
def scanner():
    return LiteralScanner()


class TestLiteralExtraction:
    """Quote styles and plain literals."""

    def test_double_quotes(self, scanner):
        assert scanner.scan_text('<p>{tr("Save changes")}</p>') == ["Save changes"]

    def test_single_quotes(self, scanner):
        assert scanner.scan_text("const label = tr('Cancel');") == ["Cancel"]

    def test_backtick_without_interpolation(self, scanner):
        assert scanner.scan_text("tr(`Hello world`)") == ["Hello world"]

    def test_whitespace_before_paren_and_quote(self, scanner):
        """Whitespace, including line breaks, is allowed before the quote."""
        text = 'tr (\n    "Translation example"\n)'
        assert scanner.scan_text(text) == ["Translation example"]

    def test_only_first_argument(self, scanner):
        text = 'tr("Hello {name}", { name: user.name })'
        assert scanner.scan_text(text) == ["Hello {name}"]

    def test_multiple_calls_on_one_line(self, scanner):
        text = 'tr("One") + " " + tr("Two")'
        assert scanner.scan_text(text) == ["One", "Two"]

    def test_non_ascii_literal(self, scanner):
        assert scanner.scan_text('tr("Çalışma alanı")') == ["Çalışma alanı"]


class TestEscapes:
    """Backslash handling."""

    def test_escaped_quote_does_not_terminate(self, scanner):
        assert scanner.scan_text('tr("Say \\"hi\\"")') == ['Say "hi"']

    def test_escaped_single_quote(self, scanner):
        assert scanner.scan_text("tr('It\\'s done')") == ["It's done"]

    def test_escaped_backslash(self, scanner):
        # Source text: tr("a\\b")
        assert scanner.scan_text('tr("a\\\\b")') == ["a\\b"]

    def test_escaped_char_copied_verbatim(self, scanner):
        # Source text: tr("Tab\there"), the escaped 't' is copied as-is
        assert scanner.scan_text('tr("Tab\\there")') == ["Tabthere"]

    def test_escaped_raw_newline_rejected(self, scanner):
        # Source text: tr("a\<newline>b")
        assert scanner.scan_text('tr("a\\\nb")') == []


class TestRejectedCalls:
    """Constructs that are skipped on purpose."""

    def test_variable_argument(self, scanner):
        assert scanner.scan_text("tr(label)") == []

    def test_empty_literal(self, scanner):
        assert scanner.scan_text('tr("")') == []

    def test_raw_newline(self, scanner):
        assert scanner.scan_text('tr("line one\nline two")') == []

    def test_crlf_newline(self, scanner):
        assert scanner.scan_text('tr("line one\r\nline two")') == []

    def test_template_interpolation(self, scanner):
        assert scanner.scan_text("tr(`Hello ${name}`)") == []

    def test_template_dollar_without_brace(self, scanner):
        assert scanner.scan_text("tr(`Costs $5`)") == ["Costs $5"]

    def test_escaped_interpolation_still_rejected(self, scanner):
        # Source text: tr(`Price \${x}`)
        assert scanner.scan_text("tr(`Price \\${x}`)") == []

    def test_interpolation_marker_in_double_quotes_rejected(self, scanner):
        assert scanner.scan_text('tr("${x}")') == []

    def test_truncated_literal(self, scanner):
        assert scanner.scan_text('tr("unterminated') == []

    def test_truncated_escape_at_end(self, scanner):
        assert scanner.scan_text('tr("dangling\\') == []

    def test_call_without_arguments(self, scanner):
        assert scanner.scan_text("tr()") == []


class TestCallToken:
    """Call-name matching and resynchronization."""

    def test_word_boundary(self, scanner):
        text = 'str("no") attr("no") i18n.tr("yes") $tr("also")'
        assert scanner.scan_text(text) == ["yes", "also"]

    def test_resync_after_truncated_literal(self, scanner):
        """A truncated literal does not hide a later call inside it."""
        text = 'tr("abc tr(\'inner\')'
        assert scanner.scan_text(text) == ["inner"]

    def test_call_inside_accepted_literal_is_scanned(self, scanner):
        text = 'tr("see tr(\'x\')")'
        assert scanner.scan_text(text) == ["see tr('x')", "x"]

    def test_custom_call_name(self):
        scanner = LiteralScanner(call_name="t")
        assert scanner.scan_text('t("x") tr("y")') == ["x"]

    def test_longer_call_name(self):
        scanner = LiteralScanner(call_name="translate")
        assert scanner.scan_text('translate("x") retranslate("y")') == ["x"]


class TestScanProperties:
    """Determinism and key invariants."""

    SAMPLES = [
        'tr("a\nb") tr(`x ${y}`) tr("ok")',
        "tr(`${a}`) tr('\\\n') tr(\"\")",
        'tr("tr(\\"nested\\")") tr(\'tr(`deep`)\')',
        'tr("unterminated tr("next")',
        "tr(`multi\nline`) tr(`fine`)",
    ]

    def test_deduplicates_in_order(self, scanner):
        assert scanner.scan_text('tr("b") tr("a") tr("b")') == ["b", "a"]

    def test_idempotent(self, scanner):
        text = 'tr("Save") tr("Cancel") tr(`Hi ${x}`)'
        assert scanner.scan_text(text) == scanner.scan_text(text)

    @pytest.mark.parametrize("text", SAMPLES)
    def test_every_key_is_valid(self, scanner, text):
        for key in scanner.scan_text(text):
            assert key
            assert "\n" not in key
            assert "${" not in key
            assert is_valid_translation_key(key)

    def test_states(self):
        assert {state.name for state in ScanState} == {
            "SEEKING_CALL", "SEEKING_QUOTE", "IN_LITERAL", "ESCAPED"
        }

    def test_scan_file(self, scanner, tmp_path):
        source = tmp_path / "page.tsx"
        source.write_text('export default () => <p>{tr("Hello")}</p>;\n', encoding="utf-8")
        assert scanner.scan_file(source) == ["Hello"]


class TestFindSourceFiles:
    """Source discovery."""

    def create_tree(self, root: Path):
        files = [
            "routes/index.tsx",
            "routes/auth.login.tsx",
            "components/Button.jsx",
            "lib/util.ts",
            "lib/legacy.js",
            "styles/site.css",
            "node_modules/pkg/index.js",
            "emailTemplates/welcome.tsx",
        ]
        for name in files:
            path = root / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text('tr("x")', encoding="utf-8")

    def test_filters_by_extension_and_exclude(self, tmp_path):
        self.create_tree(tmp_path)
        files = find_source_files(
            tmp_path,
            extensions=[".ts", ".tsx", ".js", ".jsx"],
            exclude=["node_modules", "emailTemplates/", "routes/auth.login"],
        )
        names = [p.relative_to(tmp_path).as_posix() for p in files]

        assert names == [
            "components/Button.jsx",
            "lib/legacy.js",
            "lib/util.ts",
            "routes/index.tsx",
        ]

    def test_missing_root(self, tmp_path):
        assert find_source_files(tmp_path / "missing", [".ts"]) == []
