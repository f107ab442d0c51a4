"""Mini README: Value types shared by the ledger store and the reports.

Structure:
    * TransactionKind - enum distinguishing income from expense entries.
    * TransactionEntry - immutable record of one ledger event.
    * LedgerState - immutable snapshot of totals and recent history.

Entries are never edited after creation. Reducing the balance is modelled
as a new expense entry, so the history reads as an append-only log capped
to the most recent ``HISTORY_LIMIT`` events.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, Tuple

HISTORY_LIMIT = 100
TIME_OF_DAY_FORMAT = "%H:%M"


class TransactionKind(str, Enum):
    """Enumerate the supported ledger event kinds."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionKind":
        """Coerce arbitrary casing into a valid transaction kind."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction kind: {value}") from error

    @classmethod
    def from_flag(cls, is_income: bool) -> "TransactionKind":
        """Map the persisted ``isIncome`` flag onto a kind."""

        return cls.INCOME if is_income else cls.EXPENSE


@dataclass(frozen=True, slots=True)
class TransactionEntry:
    """A single income or expense event."""

    amount: float
    kind: TransactionKind
    description: str
    timestamp: datetime

    @property
    def is_income(self) -> bool:
        return self.kind is TransactionKind.INCOME

    @property
    def signed_amount(self) -> float:
        """Positive for income, negative for expenses."""

        return self.amount if self.is_income else -self.amount

    def as_dict(self) -> Dict[str, object]:
        """Export the entry using the persisted JSON field names."""

        return {
            "amount": self.amount,
            "isIncome": self.is_income,
            "description": self.description,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class LedgerState:
    """Totals, last mutation time and newest-first history."""

    total_income: float = 0.0
    today_income: float = 0.0
    last_mutation_time: str = ""
    history: Tuple[TransactionEntry, ...] = ()


def format_time_of_day(moment: datetime) -> str:
    """Render ``moment`` as the ``HH:MM`` label stored alongside the totals."""

    return moment.strftime(TIME_OF_DAY_FORMAT)
