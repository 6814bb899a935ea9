"""Key synchronization - rebuild every locale file from the keys in source."""

import json
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple
from dataclasses import dataclass, field
from datetime import datetime

from ..core.errors import TranslationSyncError
from ..core.locale_store import LocaleStoreAccessor, LocaleMapping, PendingBatch
from ..core.scanner import LiteralScanner, find_source_files
from ..utils.colors import Colors
from ..utils.config import Config, LocaleSet
from ..utils.logging import get_logger
from ..utils.validators import is_blank


@dataclass
class KeyChanges:
    """Kaynak koddaki key'ler ile kanonik dosya arasındaki fark."""
    added: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)

    @property
    def has_changes(self) -> bool:
        return bool(self.added or self.removed)


@dataclass
class LocaleSyncResult:
    """Tek bir dilin yeniden oluşturma sonucu."""
    locale: str
    kept: int = 0
    seeded: int = 0
    dropped: int = 0
    pending: List[str] = field(default_factory=list)
    path: Optional[Path] = None

    @property
    def total_keys(self) -> int:
        return self.kept + self.seeded

    @property
    def pending_count(self) -> int:
        return len(self.pending)


@dataclass
class SyncSummary:
    """Tüm senkronizasyonun özeti."""
    canonical_locale: str
    keys: List[str] = field(default_factory=list)
    file_keys: Dict[str, List[str]] = field(default_factory=dict)
    source_file_count: int = 0
    changes: KeyChanges = field(default_factory=KeyChanges)
    results: List[LocaleSyncResult] = field(default_factory=list)
    pending_batch: PendingBatch = field(default_factory=dict)
    pending_path: Optional[Path] = None
    carried_from_batch: int = 0
    stale_batch_removed: bool = False
    dry_run: bool = False

    @property
    def total_pending(self) -> int:
        return sum(len(entries) for entries in self.pending_batch.values())

    @property
    def is_up_to_date(self) -> bool:
        return not self.pending_batch


class KeySynchronizer:
    """
    Synchronizes locale files with the tr() keys found in source.

    Every run rebuilds each locale file from scratch so that its key set is
    exactly the set of keys in source:
    - keys removed from source disappear from every locale
    - new keys get identity text (canonical) or "" (other locales)
    - existing text is carried forward
    - blank texts in non-canonical locales go to the pending batch
    """

    def __init__(
        self,
        accessor: LocaleStoreAccessor,
        locales: LocaleSet,
        scanner: Optional[LiteralScanner] = None,
        source_root: Path = Path("app"),
        extensions: Iterable[str] = ('.ts', '.tsx', '.js', '.jsx'),
        exclude: Iterable[str] = ('node_modules', 'build', '.git'),
    ):
        """
        Args:
            accessor: Locale file accessor
            locales: Supported locales and the canonical locale
            scanner: Literal scanner (default: tr() scanner)
            source_root: Application source directory to scan
            extensions: Source file suffixes to scan
            exclude: Directory names or path substrings to skip
        """
        self.accessor = accessor
        self.locales = locales
        self.scanner = scanner or LiteralScanner()
        self.source_root = Path(source_root)
        self.extensions = list(extensions)
        self.exclude = list(exclude)
        self.log = get_logger()
        self._source_file_count = 0

    @classmethod
    def from_config(
        cls,
        config: Config,
        accessor: Optional[LocaleStoreAccessor] = None
    ) -> 'KeySynchronizer':
        if accessor is None:
            accessor = LocaleStoreAccessor(
                Path(config.paths.translations),
                pending_file=config.paths.pending_file
            )
        return cls(
            accessor=accessor,
            locales=config.locale_set(),
            scanner=LiteralScanner(config.scan.call_name),
            source_root=Path(config.paths.source),
            extensions=config.scan.extensions,
            exclude=config.paths.exclude,
        )

    def collect_keys(self) -> Tuple[List[str], Dict[str, List[str]]]:
        """
        Scan every source file and union the keys.

        Returns:
            (sorted canonical keys, {relative file path: keys in that file})

        Raises:
            TranslationSyncError: A source file could not be read
        """
        source_files = find_source_files(self.source_root, self.extensions, self.exclude)
        self.log.info(f"Scanning {len(source_files)} source files...")

        all_keys = set()
        file_keys: Dict[str, List[str]] = {}

        for file_path in source_files:
            try:
                keys = self.scanner.scan_file(file_path)
            except OSError as e:
                raise TranslationSyncError(f"Could not read source file {file_path}: {e}") from e

            if keys:
                relative = file_path.relative_to(self.source_root).as_posix()
                file_keys[relative] = keys
                all_keys.update(keys)
                self.log.debug(f"  {relative}: {', '.join(keys)}")

        self._source_file_count = len(source_files)
        return sorted(all_keys), file_keys

    @staticmethod
    def compute_changes(canonical_keys: Iterable[str], existing_keys: Iterable[str]) -> KeyChanges:
        canonical = set(canonical_keys)
        existing = set(existing_keys)
        return KeyChanges(
            added=sorted(canonical - existing),
            removed=sorted(existing - canonical),
        )

    def build_store(
        self,
        locale: str,
        canonical_keys: List[str],
        prior: LocaleMapping
    ) -> Tuple[LocaleMapping, LocaleSyncResult]:
        """
        Build a fresh locale mapping containing exactly canonical_keys.

        Args:
            locale: Locale being rebuilt
            canonical_keys: Keys found in source
            prior: The locale's current file content

        Returns:
            (new mapping, result with the keys still needing translation)
        """
        result = LocaleSyncResult(locale=locale)
        store: LocaleMapping = {}
        canonical = self.locales.is_canonical(locale)

        for key in canonical_keys:
            if key in prior:
                result.kept += 1
            else:
                result.seeded += 1

            if canonical:
                store[key] = key
                continue

            text = prior.get(key, "")
            store[key] = text
            if is_blank(text):
                result.pending.append(key)

        result.dropped = len(set(prior) - set(canonical_keys))
        return store, result

    def synchronize(self, dry_run: bool = False) -> SyncSummary:
        """
        Run one synchronization.

        Every locale file and the existing pending batch are loaded before
        anything is written, so a malformed file aborts the run untouched.

        Args:
            dry_run: Compute the summary without writing files

        Returns:
            SyncSummary

        Raises:
            MalformedResourceError: A locale file or the pending batch is corrupt
            TranslationSyncError: A source file could not be read
        """
        self.log.info(f"🔍 Extracting translation keys...")
        keys, file_keys = self.collect_keys()
        self.log.info(f"Found {len(keys)} unique {self.scanner.call_name}() keys")

        summary = SyncSummary(
            canonical_locale=self.locales.canonical,
            keys=keys,
            file_keys=file_keys,
            source_file_count=self._source_file_count,
            pending_path=self.accessor.pending_path,
            dry_run=dry_run,
        )

        priors = {locale: self.accessor.load(locale) for locale in self.locales.supported}
        previous_batch = self.accessor.load_pending() or {}

        summary.changes = self.compute_changes(keys, priors[self.locales.canonical])
        if summary.changes.removed:
            self.log.info(f"🗑️  Removed keys: {', '.join(summary.changes.removed)}")
        if summary.changes.added:
            self.log.info(f"➕ New keys: {', '.join(summary.changes.added)}")

        rebuilt: Dict[str, LocaleMapping] = {}
        for locale in self.locales.supported:
            store, result = self.build_store(locale, keys, priors[locale])
            rebuilt[locale] = store
            summary.results.append(result)

            if result.pending:
                previous = previous_batch.get(locale, {})
                entries = {}
                for key in result.pending:
                    text = previous.get(key, "")
                    if is_blank(text):
                        text = ""
                    else:
                        summary.carried_from_batch += 1
                    entries[key] = text
                summary.pending_batch[locale] = entries

        if dry_run:
            return summary

        self.log.info(f"🔄 Updating translation files...")
        for result in summary.results:
            result.path = self.accessor.save(result.locale, rebuilt[result.locale])
            self.log.debug(f"  {result.path.name}: {result.total_keys} keys")

        if summary.pending_batch:
            self.accessor.save_pending(summary.pending_batch)
            self.log.info(
                f"📝 Wrote {summary.total_pending} entries to {self.accessor.pending_path.name}"
            )
        else:
            summary.stale_batch_removed = self.accessor.delete_pending()
            if summary.stale_batch_removed:
                self.log.info(f"🗑️  Removed stale {self.accessor.pending_path.name}")
            self.log.success("All translation files are up to date!")

        return summary

    def print_summary(self, summary: SyncSummary, verbose: bool = False):
        """Print the synchronization summary."""
        mode = Colors.warning("[DRY RUN]") if summary.dry_run else ""
        print(f"\n{Colors.bold('🔄 TRANSLATION SYNC')} {mode}")
        print("=" * 60)
        print(f"Canonical locale: {summary.canonical_locale}")
        print(f"Source files scanned: {summary.source_file_count}")
        print(f"Unique keys: {len(summary.keys)}")
        print()

        print(f"{Colors.bold('📊 CHANGES')}")
        print("-" * 40)
        print(f"  Removed: {len(summary.changes.removed)} keys")
        print(f"  New: {len(summary.changes.added)} keys")
        if verbose:
            for key in summary.changes.removed:
                print(f"      {Colors.error('-')} {key}")
            for key in summary.changes.added:
                print(f"      {Colors.success('+')} {key}")
        print()

        if summary.pending_batch:
            print(f"{Colors.bold('📋 PENDING BY LOCALE')}")
            print("-" * 40)
            for locale, entries in summary.pending_batch.items():
                print(f"  {Colors.warning('⚠')} {locale}: {len(entries)} to translate")
                if verbose:
                    for key in list(entries)[:10]:
                        print(f"      {key}")
                    if len(entries) > 10:
                        print(f"      ... and {len(entries) - 10} more")
            print()

        print("=" * 60)
        if summary.dry_run:
            print(f"{Colors.warning('No files were modified (dry run)')}")
        elif summary.pending_batch:
            print(f"{Colors.success('✅')} Wrote {summary.total_pending} pending entries to {summary.pending_path}")
            if summary.carried_from_batch:
                print(f"   Kept {summary.carried_from_batch} already filled entries from the previous batch")
            print(f"{Colors.info('💡')} Fill in every empty string, then run: translation-sync merge")
        else:
            print(f"{Colors.success('✅ All translation files are up to date!')}")

    def export_report(
        self,
        summary: SyncSummary,
        output_path: Path,
        format: str = "json"
    ):
        """Export the synchronization report as JSON or Markdown."""
        output_path.parent.mkdir(parents=True, exist_ok=True)

        if format == "json":
            data = {
                "timestamp": datetime.now().isoformat(),
                "canonical_locale": summary.canonical_locale,
                "dry_run": summary.dry_run,
                "summary": {
                    "source_files": summary.source_file_count,
                    "total_keys": len(summary.keys),
                    "added": len(summary.changes.added),
                    "removed": len(summary.changes.removed),
                    "pending": summary.total_pending,
                },
                "added_keys": summary.changes.added,
                "removed_keys": summary.changes.removed,
                "locales": [
                    {
                        "code": r.locale,
                        "kept": r.kept,
                        "seeded": r.seeded,
                        "dropped": r.dropped,
                        "pending": r.pending,
                    }
                    for r in summary.results
                ],
            }

            with open(output_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)

        elif format == "md":
            lines = [
                "# Translation Sync Report",
                "",
                f"**Timestamp:** {datetime.now().isoformat()}",
                f"**Canonical Locale:** {summary.canonical_locale}",
                f"**Dry Run:** {summary.dry_run}",
                "",
                "## Summary",
                "",
                "| Metric | Value |",
                "|--------|-------|",
                f"| Source Files | {summary.source_file_count} |",
                f"| Total Keys | {len(summary.keys)} |",
                f"| Added | {len(summary.changes.added)} |",
                f"| Removed | {len(summary.changes.removed)} |",
                f"| Pending | {summary.total_pending} |",
                "",
            ]

            if summary.changes.has_changes:
                lines.extend(["## Key Changes", ""])
                lines.extend(f"- ➕ `{key}`" for key in summary.changes.added)
                lines.extend(f"- 🗑️ `{key}`" for key in summary.changes.removed)
                lines.append("")

            if summary.results:
                lines.extend([
                    "## Locales",
                    "",
                    "| Locale | Kept | Seeded | Dropped | Pending |",
                    "|--------|------|--------|---------|---------|",
                ])
                for r in summary.results:
                    lines.append(f"| {r.locale} | {r.kept} | {r.seeded} | {r.dropped} | {r.pending_count} |")
                lines.append("")

            with open(output_path, 'w', encoding='utf-8') as f:
                f.write('\n'.join(lines))

        else:
            raise ValueError(f"Unsupported report format: {format}")

        print(f"{Colors.success('✓')} Report exported to: {output_path}")
