"""JSON locale file access.

One flat ``<locale>.json`` file per locale plus a single pending batch
file (``toTranslate.json`` by default) in the same directory. Every write
sorts keys so files diff cleanly and identical content gives identical
bytes.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import MalformedResourceError
from ..utils.logging import get_logger

LocaleMapping = Dict[str, str]
PendingBatch = Dict[str, Dict[str, str]]


class LocaleStoreAccessor:
    """Loads and persists locale files and the pending batch."""

    def __init__(self, translations_dir: Path, pending_file: str = "toTranslate.json"):
        """
        Args:
            translations_dir: Directory holding ``<locale>.json`` files
            pending_file: File name of the pending batch in that directory
        """
        self.translations_dir = Path(translations_dir)
        self.pending_path = self.translations_dir / pending_file
        self.log = get_logger()

    def path_for(self, locale: str) -> Path:
        return self.translations_dir / f"{locale}.json"

    def exists(self, locale: str) -> bool:
        return self.path_for(locale).is_file()

    def load(self, locale: str) -> LocaleMapping:
        """
        Load a locale file.

        A missing file is normal "no prior state" and yields an empty mapping.
        A file that exists but is not a flat string-to-string JSON object
        raises MalformedResourceError.
        """
        path = self.path_for(locale)
        if not path.exists():
            self.log.warning(f"⚠️  {path.name} not found, starting from an empty file")
            return {}

        data = self._read_json(path)
        if not isinstance(data, dict):
            raise MalformedResourceError(path, f"expected a JSON object, got {type(data).__name__}")

        for key, value in data.items():
            if not isinstance(value, str):
                raise MalformedResourceError(
                    path, f'value of "{key}" must be a string, got {type(value).__name__}'
                )

        return data

    def save(self, locale: str, mapping: LocaleMapping) -> Path:
        """Write a locale file with keys in lexicographic order."""
        path = self.path_for(locale)
        self._write_json(path, {key: mapping[key] for key in sorted(mapping)})
        return path

    # Pending batch

    def has_pending(self) -> bool:
        return self.pending_path.is_file()

    def load_pending(self) -> Optional[PendingBatch]:
        """
        Load the pending batch.

        Returns:
            None when no batch exists, otherwise ``{locale: {key: text}}``.
            JSON ``null`` texts are read as empty strings.

        Raises:
            MalformedResourceError: File exists but is not locale -> key -> text
        """
        path = self.pending_path
        if not path.exists():
            return None

        data = self._read_json(path)
        if not isinstance(data, dict):
            raise MalformedResourceError(path, f"expected a JSON object, got {type(data).__name__}")

        batch: PendingBatch = {}
        for locale, entries in data.items():
            if not isinstance(entries, dict):
                raise MalformedResourceError(path, f"invalid format for locale '{locale}'")

            batch[locale] = {}
            for key, value in entries.items():
                if value is None:
                    value = ""
                if not isinstance(value, str):
                    raise MalformedResourceError(
                        path, f'{locale}: value of "{key}" must be a string, got {type(value).__name__}'
                    )
                batch[locale][key] = value

        return batch

    def save_pending(self, batch: PendingBatch) -> Path:
        """Write the pending batch, locales and keys sorted."""
        ordered = {
            locale: {key: batch[locale][key] for key in sorted(batch[locale])}
            for locale in sorted(batch)
        }
        self._write_json(self.pending_path, ordered)
        return self.pending_path

    def delete_pending(self) -> bool:
        """Remove the pending batch. Returns True if a file was removed."""
        if not self.pending_path.exists():
            return False
        self.pending_path.unlink()
        return True

    def _read_json(self, path: Path) -> Any:
        try:
            content = path.read_text(encoding='utf-8')
        except UnicodeDecodeError as e:
            raise MalformedResourceError(path, f"not valid UTF-8 ({e})") from e

        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise MalformedResourceError(path, f"invalid JSON ({e})") from e

    def _write_json(self, path: Path, data: Dict[str, Any]):
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8', newline='\n') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write('\n')
