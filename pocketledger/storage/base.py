"""Mini README: Abstract key-value storage used to persist ledger state.

Structure:
    * StorageError - raised by backends when the durable medium fails.
    * KeyValueStore - abstract interface implemented by storage backends.

Backends hold plain strings and floats under string keys. There is no
atomicity guarantee across keys; callers that need a consistent document
write all keys together through ``set_many``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

StoredValue = Union[str, float]


class StorageError(RuntimeError):
    """The backend could not read or write its durable medium."""


class KeyValueStore(ABC):
    """Base interface for durable string/number stores."""

    backend_name: str = "generic"

    def __init__(self, location: Optional[Path] = None) -> None:
        self.location = location
        LOGGER.debug("Initialising %s backend at '%s'", self.backend_name, location)

    @abstractmethod
    def get(self, key: str) -> Optional[StoredValue]:
        """Return the stored value or ``None`` when the key is absent."""

    @abstractmethod
    def set(self, key: str, value: StoredValue) -> None:
        """Store ``value`` under ``key`` replacing any previous value."""

    @abstractmethod
    def clear(self) -> None:
        """Erase every key held by the backend."""

    def set_many(self, values: Mapping[str, StoredValue]) -> None:
        """Store several keys; backends may override to write them together."""

        for key, value in values.items():
            self.set(key, value)

    def metadata(self) -> Dict[str, str]:
        """Return diagnostic metadata for the CLI and web summaries."""

        return {
            "backend": self.backend_name,
            "location": str(self.location) if self.location else "in-memory",
        }
