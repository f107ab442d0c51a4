"""Mini README: Wiring helpers that build a ready-to-use ledger.

Structure:
    * open_ledger - create the configured backend, build the store and
      restore persisted state.

Entry points (CLI commands, the web application factory) call this once
and pass the resulting ``LedgerStore`` to whatever needs it.
"""

from __future__ import annotations

from typing import Optional

from .configuration import LedgerSettings, get_settings
from .ledger.store import Clock, LedgerStore
from .logging_utils import get_logger
from .storage import REGISTRY

LOGGER = get_logger(__name__)


def open_ledger(
    settings: Optional[LedgerSettings] = None,
    *,
    clock: Optional[Clock] = None,
) -> LedgerStore:
    """Return a restored ledger backed by the configured storage backend."""

    settings = settings or get_settings()
    if settings.storage_backend.lower() not in REGISTRY.available_backends():
        REGISTRY.load_plugins()
    backend = REGISTRY.create(settings.storage_backend, location=settings.store_path)
    store = LedgerStore(backend, clock=clock, history_limit=settings.history_limit)
    store.restore()
    LOGGER.info(
        "Opened ledger (%s) using %s backend",
        settings.environment,
        backend.backend_name,
    )
    return store
