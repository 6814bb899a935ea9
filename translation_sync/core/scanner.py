"""tr() literal scanner.

Finds ``tr("...")`` calls in arbitrary source text and extracts the literal
first argument without parsing the language. Only plain single-line
literals are accepted:

    tr("Save changes")         -> "Save changes"
    tr('It\\'s done')          -> "It's done"
    tr(`Hello`)                -> "Hello"
    tr(`Hello ${name}`)        -> skipped (template interpolation)
    tr(label)                  -> skipped (not a literal)
    tr("multi
        line")                 -> skipped (raw newline)
"""

import re
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Pattern

from ..utils.validators import is_valid_translation_key

QUOTE_CHARS = ('"', "'", '`')
TEMPLATE_QUOTE = '`'
ESCAPE_CHAR = '\\'


class ScanState(Enum):
    """Tokenizer states."""
    SEEKING_CALL = "seeking_call"    # looking for the next `tr(` token
    SEEKING_QUOTE = "seeking_quote"  # after `(`, skipping whitespace
    IN_LITERAL = "in_literal"        # consuming literal characters
    ESCAPED = "escaped"              # previous char was an unescaped backslash


class LiteralScanner:
    """
    State machine that extracts translation keys from source text.

    Each call token is handled independently: after a literal is accepted
    or abandoned, scanning resumes right after that call's ``(``, not after
    the literal. A truncated literal therefore never hides a later call.
    """

    def __init__(self, call_name: str = "tr"):
        self.call_name = call_name
        self._call_pattern: Pattern[str] = re.compile(
            r'\b' + re.escape(call_name) + r'\s*\(',
            re.ASCII
        )

    def scan_text(self, text: str) -> List[str]:
        """
        Extract keys from source text.

        Args:
            text: Raw source text

        Returns:
            Unique keys in order of first appearance
        """
        keys: List[str] = []
        seen = set()

        # SEEKING_CALL: each match is one call token
        for match in self._call_pattern.finditer(text):
            key = self._read_literal(text, match.end())
            if key is not None and key not in seen:
                seen.add(key)
                keys.append(key)

        return keys

    def _read_literal(self, text: str, start: int) -> Optional[str]:
        """Run the tokenizer from just after ``(``. Returns the key or None."""
        state = ScanState.SEEKING_QUOTE
        quote = ''
        chars: List[str] = []
        has_newline = False
        has_interpolation = False
        index = start
        length = len(text)

        while index < length:
            char = text[index]

            if state is ScanState.SEEKING_QUOTE:
                if char.isspace():
                    index += 1
                    continue
                if char not in QUOTE_CHARS:
                    return None
                quote = char
                state = ScanState.IN_LITERAL

            elif state is ScanState.ESCAPED:
                if char in '\r\n':
                    has_newline = True
                chars.append(char)
                state = ScanState.IN_LITERAL

            elif char == ESCAPE_CHAR:
                state = ScanState.ESCAPED

            elif char == quote:
                if not chars or has_newline or has_interpolation:
                    return None
                key = ''.join(chars)
                return key if is_valid_translation_key(key) else None

            else:
                if char in '\r\n':
                    has_newline = True
                elif (quote == TEMPLATE_QUOTE and char == '$'
                      and index + 1 < length and text[index + 1] == '{'):
                    has_interpolation = True
                chars.append(char)

            index += 1

        # Ran off the end before the closing quote
        return None

    def scan_file(self, file_path: Path) -> List[str]:
        """Read a UTF-8 source file and scan it."""
        text = Path(file_path).read_text(encoding='utf-8', errors='replace')
        return self.scan_text(text)


def find_source_files(
    root: Path,
    extensions: Iterable[str],
    exclude: Iterable[str] = (),
) -> List[Path]:
    """
    Find source files to scan.

    Args:
        root: Directory to walk
        extensions: File suffixes to include (e.g. ['.ts', '.tsx'])
        exclude: Directory names or path substrings to skip

    Returns:
        Sorted list of file paths
    """
    root = Path(root)
    if not root.is_dir():
        return []

    suffixes = {ext.lower() for ext in extensions}
    excluded = [item.strip('/') for item in exclude if item.strip('/')]

    files = []
    for file_path in root.rglob('*'):
        if file_path.suffix.lower() not in suffixes or not file_path.is_file():
            continue

        relative = file_path.relative_to(root)
        relative_str = relative.as_posix()
        if any(item in relative.parts or ('/' in item and item in relative_str)
               for item in excluded):
            continue

        files.append(file_path)

    return sorted(files)
