"""Validation utilities."""

import re
from typing import Any, Optional

# Template interpolation opener (`${name}`)
INTERPOLATION_OPEN = '${'

_CALL_NAME_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')


def is_valid_locale_code(code: str) -> bool:
    """
    Validate a locale identifier used as a locale file name.

    Examples: en, de, pt-br, zh-cn, zh-TW, zh-Hans
    """
    if not code or not isinstance(code, str):
        return False

    # Allow 2-3 letter base codes
    if code.isalpha() and 2 <= len(code) <= 3:
        return True

    # Allow locale variants like pt-br, en-US, zh-Hans
    parts = code.split('-')
    if len(parts) == 2:
        base, region = parts
        if base.isalpha() and 2 <= len(base) <= 3 and region.isalnum() and 2 <= len(region) <= 4:
            return True

    return False


def is_valid_call_name(name: str) -> bool:
    """Check that the translation function name is a plain identifier (no `$`)."""
    return bool(name) and bool(_CALL_NAME_PATTERN.match(name))


def is_valid_translation_key(key: str) -> bool:
    """
    Check the invariants every extracted key must hold.

    A key is never empty, never contains a raw line break and never
    contains template interpolation syntax.
    """
    if not key:
        return False

    if '\n' in key or '\r' in key:
        return False

    if INTERPOLATION_OPEN in key:
        return False

    return True


def is_blank(value: Optional[Any]) -> bool:
    """True when a translation text is missing or whitespace only."""
    if value is None:
        return True
    return not str(value).strip()
