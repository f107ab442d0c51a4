"""Mini README: Dictionary backed storage backend.

Structure:
    * MemoryStore - keeps values in a process-local dict.

Handy for tests and throwaway sessions; nothing survives the process.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from ..base import KeyValueStore, StoredValue
from ..registry import REGISTRY


class MemoryStore(KeyValueStore):
    """Volatile backend holding values in memory."""

    backend_name = "memory"

    def __init__(self, location: Optional[Path] = None) -> None:
        super().__init__(location=None)
        self._values: Dict[str, StoredValue] = {}

    def get(self, key: str) -> Optional[StoredValue]:
        return self._values.get(key)

    def set(self, key: str, value: StoredValue) -> None:
        self._values[key] = value

    def clear(self) -> None:
        self._values.clear()

    def snapshot(self) -> Dict[str, StoredValue]:
        """Copy of the stored values, mostly useful in tests."""

        return dict(self._values)


REGISTRY.register(MemoryStore)
