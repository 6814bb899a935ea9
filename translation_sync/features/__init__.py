"""Feature modules."""

from .synchronizer import KeySynchronizer, LocaleSet, KeyChanges, LocaleSyncResult, SyncSummary
from .merger import MergeValidator, LocaleMergeResult, MergeSummary

__all__ = [
    'KeySynchronizer',
    'LocaleSet',
    'KeyChanges',
    'LocaleSyncResult',
    'SyncSummary',
    'MergeValidator',
    'LocaleMergeResult',
    'MergeSummary',
]
