"""Mini README: Built-in storage backends.

Each module exports a ``KeyValueStore`` subclass and registers it with
``REGISTRY`` on import so settings can refer to it by name.
"""

from .json_file import JsonFileStore
from .memory import MemoryStore

__all__ = ["JsonFileStore", "MemoryStore"]
