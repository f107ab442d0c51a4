"""Mini README: Backend registry enabling pluggable ledger storage.

Structure:
    * StoreBackendRegistry - maps backend identifiers to ``KeyValueStore``
      classes and instantiates them.

Built-in backends register themselves on import. Third-party packages can
expose extra backends through the ``pocketledger.storage_backends`` entry
point group and have them picked up by ``load_plugins``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Type

from .base import KeyValueStore
from ..logging_utils import get_logger
from ..utils.plugin_loader import load_entry_point_plugins

LOGGER = get_logger(__name__)

PLUGIN_GROUP = "pocketledger.storage_backends"


class StoreBackendRegistry:
    """Simple registry for mapping backend identifiers to classes."""

    def __init__(self) -> None:
        self._backends: Dict[str, Type[KeyValueStore]] = {}

    def register(self, backend: Type[KeyValueStore]) -> None:
        """Register a new backend class with the registry."""

        identifier = backend.backend_name.lower()
        LOGGER.debug("Registering storage backend '%s'", identifier)
        self._backends[identifier] = backend

    def available_backends(self) -> Iterable[str]:
        """Return iterable of backend identifiers for display."""

        return sorted(self._backends.keys())

    def create(self, identifier: str, *, location: Optional[Path] = None) -> KeyValueStore:
        """Instantiate a backend matching the identifier."""

        backend_cls = self._backends.get(identifier.lower())
        if not backend_cls:
            raise KeyError(f"Unknown storage backend '{identifier}'")
        LOGGER.info("Creating storage backend '%s'", identifier)
        return backend_cls(location=location)

    def load_plugins(self, group: str = PLUGIN_GROUP) -> List[str]:
        """Register backend classes advertised through entry points."""

        registered: List[str] = []
        for plugin in load_entry_point_plugins(group):
            if isinstance(plugin, type) and issubclass(plugin, KeyValueStore):
                self.register(plugin)
                registered.append(plugin.backend_name.lower())
            else:
                LOGGER.warning("Ignoring entry point %r; not a KeyValueStore subclass", plugin)
        return registered


REGISTRY = StoreBackendRegistry()
