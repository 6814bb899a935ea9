"""Merge a completed toTranslate.json back into the locale files."""

from pathlib import Path
from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass, field

from ..core.errors import (
    IncompleteBatchError,
    MergeInvariantError,
    NothingToMergeError,
)
from ..core.locale_store import LocaleStoreAccessor, LocaleMapping, PendingBatch
from ..utils.colors import Colors
from ..utils.logging import get_logger
from ..utils.validators import is_blank


@dataclass
class LocaleMergeResult:
    """Tek bir dilin birleştirme sonucu."""
    locale: str
    merged: int = 0
    error: Optional[str] = None
    path: Optional[Path] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class MergeSummary:
    """Birleştirme özeti."""
    batch_path: Path
    results: List[LocaleMergeResult] = field(default_factory=list)
    batch_removed: bool = False

    @property
    def total_merged(self) -> int:
        return sum(r.merged for r in self.results)

    @property
    def failed_locales(self) -> List[str]:
        return [r.locale for r in self.results if not r.ok]

    @property
    def success(self) -> bool:
        return not self.failed_locales


class MergeValidator:
    """
    Validates a completed pending batch and folds it into the locale files.

    The merge is all-or-nothing at the validation stage: a single blank
    entry, a malformed batch or a malformed locale file rejects the whole
    batch before any file is written. After validation, a locale whose file
    is missing or cannot be written is reported and skipped; the others are
    still merged.
    """

    def __init__(self, accessor: LocaleStoreAccessor):
        self.accessor = accessor
        self.log = get_logger()

    @staticmethod
    def find_blank_entries(batch: PendingBatch) -> List[Tuple[str, str]]:
        """Return every (locale, key) whose text is missing or blank."""
        return [
            (locale, key)
            for locale, entries in batch.items()
            for key, text in entries.items()
            if is_blank(text)
        ]

    def load_batch(self) -> PendingBatch:
        """
        Load and validate the pending batch.

        Raises:
            NothingToMergeError: No batch file exists
            MalformedResourceError: Batch is not locale -> key -> text
            IncompleteBatchError: Any text is blank
        """
        batch = self.accessor.load_pending()
        if batch is None:
            raise NothingToMergeError(self.accessor.pending_path)

        self.log.info(f"📄 Found translations for locales: {', '.join(batch)}")

        blanks = self.find_blank_entries(batch)
        if blanks:
            raise IncompleteBatchError(blanks)

        return batch

    def merge(self) -> MergeSummary:
        """
        Validate the pending batch and apply it.

        Returns:
            MergeSummary with per-locale results

        Raises:
            NothingToMergeError, MalformedResourceError, IncompleteBatchError:
                Validation failed, nothing was written
            MergeInvariantError: Validation passed but no entry was merged
        """
        self.log.info(f"🔄 Merging translations...")
        batch = self.load_batch()
        summary = MergeSummary(batch_path=self.accessor.pending_path)
        results = {locale: LocaleMergeResult(locale=locale) for locale in batch}

        # Load every target before the first write
        stores: Dict[str, LocaleMapping] = {}
        for locale in batch:
            if not self.accessor.exists(locale):
                results[locale].error = f"{self.accessor.path_for(locale).name} not found"
                self.log.fail(f"Error merging translations for '{locale}': {results[locale].error}")
                continue
            try:
                stores[locale] = self.accessor.load(locale)
            except OSError as e:
                results[locale].error = str(e)
                self.log.fail(f"Error merging translations for '{locale}': {e}")

        for locale, store in stores.items():
            result = results[locale]
            merged = 0
            for key, text in batch[locale].items():
                if is_blank(text):
                    continue
                store[key] = text
                merged += 1

            try:
                result.path = self.accessor.save(locale, store)
            except OSError as e:
                result.error = str(e)
                self.log.fail(f"Error merging translations for '{locale}': {e}")
                continue

            result.merged = merged
            self.log.info(f"{Colors.success('✅')} {locale}.json: merged {merged} translations")

        summary.results = [results[locale] for locale in batch]
        failed = summary.failed_locales

        if summary.total_merged == 0:
            if failed:
                return summary
            raise MergeInvariantError(
                "No translations were merged although validation passed; "
                f"{self.accessor.pending_path.name} was left in place"
            )

        if failed:
            # Keep the work of failed locales for the next merge
            self.accessor.save_pending({locale: batch[locale] for locale in failed})
        else:
            summary.batch_removed = self.accessor.delete_pending()

        return summary

    def print_summary(self, summary: MergeSummary):
        """Print the merge summary."""
        print()
        print("=" * 60)
        if summary.failed_locales:
            print(f"{Colors.warning('⚠️')}  Merged {summary.total_merged} translations, "
                  f"{len(summary.failed_locales)} locale(s) failed: {', '.join(summary.failed_locales)}")
            if summary.total_merged:
                print(f"   {summary.batch_path.name} now only contains the failed locales")
            else:
                print(f"   {summary.batch_path.name} was left unchanged")
        else:
            print(f"{Colors.success('🎉')} Successfully merged {summary.total_merged} translations")
            if summary.batch_removed:
                print(f"🗑️  Deleted {summary.batch_path.name} (all translations applied)")
