"""Mini README: JSON document storage backend.

Structure:
    * JsonFileStore - persists all keys as one JSON object on disk.

Every write rewrites the whole document through a temporary file followed
by an atomic rename, so a reader never sees a half-written file. A
document that cannot be parsed when the backend opens is ignored and the
backend starts empty; the next write replaces it.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Mapping, Optional

from ..base import KeyValueStore, StorageError, StoredValue
from ..registry import REGISTRY
from ...logging_utils import get_logger

LOGGER = get_logger(__name__)

DEFAULT_FILENAME = "ledger.json"


class JsonFileStore(KeyValueStore):
    """Backend writing a single JSON document per ledger."""

    backend_name = "json"

    def __init__(self, location: Optional[Path] = None) -> None:
        path = Path(location) if location is not None else Path(DEFAULT_FILENAME)
        super().__init__(location=path)
        self.path = path
        self._values: Dict[str, StoredValue] = self._read()

    def _read(self) -> Dict[str, StoredValue]:
        if not self.path.exists():
            return {}
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as error:
            LOGGER.warning("Ignoring unreadable ledger document %s: %s", self.path, error)
            return {}
        if not isinstance(document, dict):
            LOGGER.warning("Ignoring ledger document %s; expected a JSON object", self.path)
            return {}
        return document

    def _write(self) -> None:
        temporary = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temporary.write_text(json.dumps(self._values, indent=2), encoding="utf-8")
            temporary.replace(self.path)
        except OSError as error:
            raise StorageError(f"Unable to write ledger document {self.path}: {error}") from error
        LOGGER.debug("Wrote %s keys to %s", len(self._values), self.path)

    def get(self, key: str) -> Optional[StoredValue]:
        return self._values.get(key)

    def set(self, key: str, value: StoredValue) -> None:
        self._values[key] = value
        self._write()

    def set_many(self, values: Mapping[str, StoredValue]) -> None:
        self._values.update(values)
        self._write()

    def clear(self) -> None:
        self._values = {}
        try:
            self.path.unlink(missing_ok=True)
        except OSError as error:
            raise StorageError(f"Unable to remove ledger document {self.path}: {error}") from error
        LOGGER.info("Cleared ledger document %s", self.path)


REGISTRY.register(JsonFileStore)
