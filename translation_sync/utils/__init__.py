"""Utility modules."""

from .colors import Colors
from .config import Config, ConfigValidationError, create_default_config
from .validators import (
    is_valid_locale_code,
    is_valid_call_name,
    is_valid_translation_key,
    is_blank,
)

__all__ = [
    'Colors',
    'Config',
    'ConfigValidationError',
    'create_default_config',
    'is_valid_locale_code',
    'is_valid_call_name',
    'is_valid_translation_key',
    'is_blank',
]
