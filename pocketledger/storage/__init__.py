"""Mini README: Storage subsystem package initialiser.

``base`` holds the abstract key-value interface, ``registry`` the backend
registry and ``backends`` the built-in implementations.
"""

from .base import KeyValueStore, StorageError, StoredValue
from .registry import REGISTRY, StoreBackendRegistry
from . import backends  # noqa: F401  # ensure built-in backends register on import
from .backends import JsonFileStore, MemoryStore

__all__ = [
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "REGISTRY",
    "StorageError",
    "StoreBackendRegistry",
    "StoredValue",
]
