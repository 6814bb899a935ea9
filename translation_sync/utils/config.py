"""Configuration management for translation-sync."""

import yaml
from pathlib import Path
from typing import Dict, List, Optional, Any, Tuple
from dataclasses import dataclass, field

from .validators import is_valid_locale_code, is_valid_call_name

CONFIG_FILE_NAME = '.translation-sync.yml'

DEFAULT_LOCALES = [
    "en",     # English
    "de",     # German
    "fr",     # French
    "es",     # Spanish
    "sv",     # Swedish
    "pt-br",  # Portuguese (Brazil)
    "it",     # Italian
    "nl",     # Dutch
    "ja",     # Japanese
    "ko",     # Korean
    "zh-cn",  # Chinese (Simplified)
    "zh-tw",  # Chinese (Traditional)
    "tr",     # Turkish
    "th",     # Thai
    "pl",     # Polish
    "ar",     # Arabic
    "da",     # Danish
    "fi",     # Finnish
    "id",     # Indonesian
    "ms",     # Malay
]


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Configuration validation failed: {'; '.join(errors)}")


class ConfigValidationWarning:
    """Represents a configuration warning (non-fatal)."""

    def __init__(self, message: str):
        self.message = message

    def __str__(self):
        return self.message


@dataclass(frozen=True)
class LocaleSet:
    """Supported locales and the canonical one that defines the key universe."""
    canonical: str
    supported: Tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, 'supported', tuple(self.supported))
        if self.canonical not in self.supported:
            raise ValueError(
                f"Canonical locale '{self.canonical}' must be one of the supported locales"
            )

    def is_canonical(self, locale: str) -> bool:
        return locale == self.canonical

    @property
    def targets(self) -> Tuple[str, ...]:
        """Every non-canonical locale, in configured order."""
        return tuple(locale for locale in self.supported if locale != self.canonical)


@dataclass
class PathsConfig:
    """Paths configuration."""
    source: str = "app"
    translations: str = "app/translations"
    pending_file: str = "toTranslate.json"
    exclude: List[str] = field(default_factory=lambda: [
        'node_modules', 'build', '.git'
    ])


@dataclass
class LocalesConfig:
    """Locales configuration."""
    canonical: str = "en"
    supported: List[str] = field(default_factory=lambda: list(DEFAULT_LOCALES))


@dataclass
class ScanConfig:
    """Scanner configuration."""
    call_name: str = "tr"
    extensions: List[str] = field(default_factory=lambda: ['.ts', '.tsx', '.js', '.jsx'])


@dataclass
class Config:
    """Main configuration class."""
    paths: PathsConfig = field(default_factory=PathsConfig)
    locales: LocalesConfig = field(default_factory=LocalesConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from a YAML file.

        Without an explicit path, ``.translation-sync.yml`` in the current
        directory is used when present, otherwise defaults are returned.
        """
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILE_NAME

            if not config_path.exists():
                return cls()

        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigValidationError([f"{config_path} must contain a mapping"])

        try:
            return cls(
                paths=PathsConfig(**(data.get('paths') or {})),
                locales=LocalesConfig(**(data.get('locales') or {})),
                scan=ScanConfig(**(data.get('scan') or {})),
            )
        except TypeError as e:
            raise ConfigValidationError([f"{config_path}: {e}"]) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'paths': {
                'source': self.paths.source,
                'translations': self.paths.translations,
                'pending_file': self.paths.pending_file,
                'exclude': self.paths.exclude,
            },
            'locales': {
                'canonical': self.locales.canonical,
                'supported': self.locales.supported,
            },
            'scan': {
                'call_name': self.scan.call_name,
                'extensions': self.scan.extensions,
            },
        }

    def save(self, config_path: Optional[Path] = None):
        """Save configuration to YAML file."""
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILE_NAME

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    def locale_set(self) -> LocaleSet:
        """Build the LocaleSet handed to the synchronizer."""
        return LocaleSet(
            canonical=self.locales.canonical,
            supported=tuple(self.locales.supported),
        )

    def validate(self, raise_on_error: bool = False) -> Tuple[List[str], List[ConfigValidationWarning]]:
        """
        Validate configuration and return errors and warnings.

        Args:
            raise_on_error: If True, raise ConfigValidationError on validation errors

        Returns:
            Tuple of (errors, warnings) lists
        """
        errors = []
        warnings = []

        # Locales
        if not is_valid_locale_code(self.locales.canonical):
            errors.append(
                f"Invalid canonical locale code: '{self.locales.canonical}'. "
                f"Use codes like 'en', 'pt-br', 'zh-cn'"
            )

        if not self.locales.supported:
            errors.append("locales.supported cannot be empty")

        seen = set()
        for locale in self.locales.supported:
            if not is_valid_locale_code(locale):
                errors.append(f"Invalid supported locale code: '{locale}'")
            if locale in seen:
                errors.append(f"Duplicate supported locale: '{locale}'")
            seen.add(locale)

        if self.locales.canonical not in self.locales.supported:
            errors.append(
                f"Canonical locale '{self.locales.canonical}' not in supported locales list"
            )

        # Scanner
        if not is_valid_call_name(self.scan.call_name):
            errors.append(f"Invalid scan.call_name: '{self.scan.call_name}'")

        if not self.scan.extensions:
            errors.append("scan.extensions cannot be empty")

        for ext in self.scan.extensions:
            if not ext.startswith('.'):
                errors.append(f"File extension must start with '.': '{ext}'")

        # Paths
        if not self.paths.pending_file or Path(self.paths.pending_file).name != self.paths.pending_file:
            errors.append(f"paths.pending_file must be a plain file name: '{self.paths.pending_file}'")
        elif Path(self.paths.pending_file).stem in self.locales.supported:
            errors.append(
                f"paths.pending_file '{self.paths.pending_file}' clashes with a locale file name"
            )

        if not Path(self.paths.source).exists():
            warnings.append(ConfigValidationWarning(
                f"Source path does not exist: {self.paths.source}"
            ))

        if raise_on_error and errors:
            raise ConfigValidationError(errors)

        return errors, warnings


def create_default_config() -> Config:
    """Create the default configuration written by ``init``."""
    return Config()
