"""Core modules: literal scanning and locale file access."""

from .scanner import LiteralScanner, ScanState, find_source_files
from .locale_store import LocaleStoreAccessor
from .errors import (
    TranslationSyncError,
    MalformedResourceError,
    NothingToMergeError,
    IncompleteBatchError,
    MergeInvariantError,
)

__all__ = [
    'LiteralScanner',
    'ScanState',
    'find_source_files',
    'LocaleStoreAccessor',
    'TranslationSyncError',
    'MalformedResourceError',
    'NothingToMergeError',
    'IncompleteBatchError',
    'MergeInvariantError',
]
