"""Mini README: Ledger package for pocketledger.

Holds the immutable value types, the history codec and the ``LedgerStore``
that owns totals and history and persists them to a key-value backend.
"""

from .codec import HistoryDecodeError, decode_history, encode_history
from .models import HISTORY_LIMIT, LedgerState, TransactionEntry, TransactionKind
from .store import LedgerStore

__all__ = [
    "HISTORY_LIMIT",
    "HistoryDecodeError",
    "LedgerState",
    "LedgerStore",
    "TransactionEntry",
    "TransactionKind",
    "decode_history",
    "encode_history",
]
