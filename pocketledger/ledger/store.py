"""Mini README: Ledger store owning totals, history and persistence.

Structure:
    * LedgerStore - records income and expenses, resets, restores and
      notifies subscribers whenever the state changes.

The store is the single writer of ``LedgerState``. Each mutation builds a
new snapshot, writes the full state to the key-value backend and then
tells listeners. A failed write is logged and otherwise ignored: memory
stays authoritative and the durable copy catches up on the next
successful save. Amounts are trusted; validate them at the boundary with
``pocketledger.interface.inputs.parse_amount``.

Persisted keys:
    ``totalIncome``, ``todayIncome`` (floats), ``lastAdditionTime`` (HH:MM)
    and ``transactionHistory`` (JSON array, newest first).
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Callable, List, Optional

from .codec import HistoryDecodeError, decode_history, encode_history
from .models import (
    HISTORY_LIMIT,
    LedgerState,
    TransactionEntry,
    TransactionKind,
    format_time_of_day,
)
from ..logging_utils import get_logger
from ..storage.base import KeyValueStore, StorageError, StoredValue

LOGGER = get_logger(__name__)

TOTAL_INCOME_KEY = "totalIncome"
TODAY_INCOME_KEY = "todayIncome"
LAST_ADDITION_TIME_KEY = "lastAdditionTime"
HISTORY_KEY = "transactionHistory"

Listener = Callable[[LedgerState], None]
Clock = Callable[[], datetime]


class LedgerStore:
    """Own the ledger state and keep the backend in step with it."""

    def __init__(
        self,
        backend: KeyValueStore,
        *,
        clock: Optional[Clock] = None,
        history_limit: int = HISTORY_LIMIT,
    ) -> None:
        if history_limit < 1:
            raise ValueError("history_limit must be at least 1")
        self._backend = backend
        self._clock: Clock = clock or datetime.now
        self._history_limit = history_limit
        self._listeners: List[Listener] = []
        self._state = LedgerState(last_mutation_time=format_time_of_day(self._clock()))
        LOGGER.debug(
            "Ledger store initialised with backend=%s history_limit=%s",
            backend.backend_name,
            history_limit,
        )

    @property
    def state(self) -> LedgerState:
        return self._state

    @property
    def backend(self) -> KeyValueStore:
        return self._backend

    @property
    def history_limit(self) -> int:
        return self._history_limit

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for state changes; returns an unsubscribe callable."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def record_income(self, amount: float, description: str) -> None:
        """Add ``amount`` to both totals and log an income entry."""

        state = self._state
        self._apply(
            TransactionKind.INCOME,
            amount,
            description,
            total_income=state.total_income + amount,
            today_income=state.today_income + amount,
        )

    def record_expense(self, amount: float, description: str) -> None:
        """Subtract ``amount`` from both totals, each floored at zero."""

        state = self._state
        self._apply(
            TransactionKind.EXPENSE,
            amount,
            description,
            total_income=max(0.0, state.total_income - amount),
            today_income=max(0.0, state.today_income - amount),
        )

    def reset(self) -> None:
        """Zero every field and erase the durable copy."""

        self._state = LedgerState(last_mutation_time=format_time_of_day(self._clock()))
        try:
            self._backend.clear()
        except StorageError:
            LOGGER.exception("Failed to clear persisted ledger state")
        LOGGER.info("Ledger reset")
        self._notify()

    def restore(self) -> LedgerState:
        """Load totals and history from the backend, defaulting missing parts."""

        history = self._restore_history()
        self._state = LedgerState(
            total_income=self._restore_amount(TOTAL_INCOME_KEY),
            today_income=self._restore_amount(TODAY_INCOME_KEY),
            last_mutation_time=self._restore_time(),
            history=tuple(history[: self._history_limit]),
        )
        LOGGER.info(
            "Restored ledger: total=%.2f today=%.2f entries=%s",
            self._state.total_income,
            self._state.today_income,
            len(self._state.history),
        )
        self._notify()
        return self._state

    def _apply(
        self,
        kind: TransactionKind,
        amount: float,
        description: str,
        *,
        total_income: float,
        today_income: float,
    ) -> None:
        now = self._clock()
        entry = TransactionEntry(amount=amount, kind=kind, description=description, timestamp=now)
        history = (entry,) + self._state.history[: self._history_limit - 1]
        self._state = replace(
            self._state,
            total_income=total_income,
            today_income=today_income,
            last_mutation_time=format_time_of_day(now),
            history=history,
        )
        LOGGER.info(
            "Recorded %s of %.2f (total=%.2f today=%.2f)",
            kind.value,
            amount,
            total_income,
            today_income,
        )
        self._persist()
        self._notify()

    def _persist(self) -> None:
        state = self._state
        payload = {
            TOTAL_INCOME_KEY: state.total_income,
            TODAY_INCOME_KEY: state.today_income,
            LAST_ADDITION_TIME_KEY: state.last_mutation_time,
            HISTORY_KEY: encode_history(state.history),
        }
        try:
            self._backend.set_many(payload)
        except StorageError:
            LOGGER.exception("Failed to persist ledger state; durable copy is stale")

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)

    def _restore_amount(self, key: str) -> float:
        value = self._backend.get(key)
        if value is None:
            return 0.0
        try:
            return float(value)
        except (TypeError, ValueError):
            LOGGER.warning("Persisted %s=%r is not numeric; using 0", key, value)
            return 0.0

    def _restore_time(self) -> str:
        value = self._backend.get(LAST_ADDITION_TIME_KEY)
        if isinstance(value, str) and value:
            return value
        return format_time_of_day(self._clock())

    def _restore_history(self) -> List[TransactionEntry]:
        blob: Optional[StoredValue] = self._backend.get(HISTORY_KEY)
        if not isinstance(blob, str) or not blob:
            return []
        try:
            return decode_history(blob)
        except HistoryDecodeError as error:
            LOGGER.warning("Discarding persisted transaction history: %s", error)
            return []
