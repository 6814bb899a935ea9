"""
Translation Sync
================

Keeps JSON locale files in sync with the ``tr("...")`` calls found in
application source, and folds AI/human translations back in.

Usage:
    from translation_sync import Config, LocaleStoreAccessor, KeySynchronizer

    config = Config.from_file()
    accessor = LocaleStoreAccessor(Path(config.paths.translations))
    summary = KeySynchronizer.from_config(config, accessor).synchronize()

CLI:
    translation-sync synchronize
    translation-sync merge
"""

from .__version__ import __version__, __author__, __description__

# Core exports
from .core.scanner import LiteralScanner, find_source_files
from .core.locale_store import LocaleStoreAccessor
from .core.errors import (
    TranslationSyncError,
    MalformedResourceError,
    NothingToMergeError,
    IncompleteBatchError,
    MergeInvariantError,
)

# Features
from .features.synchronizer import KeySynchronizer, LocaleSet, SyncSummary
from .features.merger import MergeValidator, MergeSummary

# Configuration
from .utils.config import Config

__all__ = [
    '__version__',
    '__author__',
    '__description__',
    'LiteralScanner',
    'find_source_files',
    'LocaleStoreAccessor',
    'TranslationSyncError',
    'MalformedResourceError',
    'NothingToMergeError',
    'IncompleteBatchError',
    'MergeInvariantError',
    'KeySynchronizer',
    'LocaleSet',
    'SyncSummary',
    'MergeValidator',
    'MergeSummary',
    'Config',
]
