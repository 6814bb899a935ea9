"""Error classes for synchronize and merge runs."""

from pathlib import Path
from typing import List, Optional, Tuple


class TranslationSyncError(Exception):
    """Base class for every reportable synchronize/merge failure."""


class MalformedResourceError(TranslationSyncError):
    """
    Raised when a locale file or toTranslate.json exists but cannot be decoded.

    Absence is never reported with this error; a missing file is treated as
    empty state by the accessor.
    """

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Malformed file {self.path}: {reason}")


class NothingToMergeError(TranslationSyncError):
    """Raised when merge runs without a pending batch."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"No {self.path.name} found. Run synchronize first.")


class IncompleteBatchError(TranslationSyncError):
    """Raised when the pending batch still contains blank translations."""

    def __init__(self, entries: List[Tuple[str, str]]):
        self.entries = entries
        super().__init__(
            f"{len(entries)} translation(s) are still empty: "
            + ', '.join(self.describe(locale, key) for locale, key in entries)
        )

    @staticmethod
    def describe(locale: str, key: str) -> str:
        return f'{locale}: "{key}"'


class MergeInvariantError(TranslationSyncError):
    """Raised when a batch passed validation but no entry was merged."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message or "No translations were merged although validation passed"
        )
