"""Mini README: Shared fixtures for the pocketledger test-suite.

Structure:
    * FixedClock - controllable replacement for ``datetime.now``.
    * clock / memory_backend / store - fixtures wiring a ledger to memory.
"""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from pocketledger.ledger import LedgerStore
from pocketledger.storage import MemoryStore


class FixedClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **delta: float) -> None:
        self.now = self.now + timedelta(**delta)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2024, 5, 15, 9, 30))


@pytest.fixture
def memory_backend() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def store(memory_backend: MemoryStore, clock: FixedClock) -> LedgerStore:
    return LedgerStore(memory_backend, clock=clock)
