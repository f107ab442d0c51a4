"""Mini README: JSON codec for the persisted transaction history.

Structure:
    * HistoryDecodeError - raised when a stored history blob cannot be read.
    * encode_history - serialise entries (newest first) into a JSON array.
    * decode_history - parse and validate a JSON array back into entries.

Decoding validates every element with pydantic so a wrong type, missing
field or broken JSON surfaces as one ``HistoryDecodeError``. Choosing what
to do about it is left to the caller.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Iterable, List

from pydantic import BaseModel, ConfigDict, Field, StrictBool, TypeAdapter, ValidationError

from .models import TransactionEntry, TransactionKind


class HistoryDecodeError(ValueError):
    """The persisted history blob is not a valid list of entries."""


class _EntryPayload(BaseModel):
    """Wire shape of one persisted entry."""

    model_config = ConfigDict(extra="ignore")

    amount: float = Field(gt=0, allow_inf_nan=False)
    isIncome: StrictBool
    description: str
    timestamp: datetime

    def to_entry(self) -> TransactionEntry:
        return TransactionEntry(
            amount=self.amount,
            kind=TransactionKind.from_flag(self.isIncome),
            description=self.description,
            timestamp=self.timestamp,
        )


_HISTORY_ADAPTER = TypeAdapter(List[_EntryPayload])


def encode_history(entries: Iterable[TransactionEntry]) -> str:
    """Serialise entries to the JSON array stored under ``transactionHistory``."""

    return json.dumps([entry.as_dict() for entry in entries])


def decode_history(blob: str | bytes) -> List[TransactionEntry]:
    """Parse a stored history blob, preserving order."""

    try:
        payloads = _HISTORY_ADAPTER.validate_json(blob)
    except ValidationError as error:
        raise HistoryDecodeError(
            f"Stored transaction history is malformed ({error.error_count()} problem(s))"
        ) from error
    return [payload.to_entry() for payload in payloads]
