"""Mini README: Tests for the transaction history JSON codec."""

from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

from pocketledger.ledger import (
    HistoryDecodeError,
    TransactionEntry,
    TransactionKind,
    decode_history,
    encode_history,
)


def test_encode_then_decode_reproduces_entries_in_order() -> None:
    entries = [
        TransactionEntry(19.99, TransactionKind.EXPENSE, "Books", datetime(2024, 6, 2, 18, 5, 7, 123456)),
        TransactionEntry(1200.0, TransactionKind.INCOME, "", datetime(2024, 6, 1, 8, 0)),
        TransactionEntry(
            3.5, TransactionKind.INCOME, "Çay", datetime(2023, 12, 31, 23, 59, tzinfo=timezone.utc)
        ),
    ]

    assert decode_history(encode_history(entries)) == entries


def test_encoded_shape_uses_persisted_field_names() -> None:
    blob = encode_history(
        [TransactionEntry(10.0, TransactionKind.EXPENSE, "Taxi", datetime(2024, 2, 29, 7, 15))]
    )
    assert json.loads(blob) == [
        {"amount": 10.0, "isIncome": False, "description": "Taxi", "timestamp": "2024-02-29T07:15:00"}
    ]


def test_decode_accepts_integer_amounts_and_millisecond_timestamps() -> None:
    """Blobs written by other clients may use ints and ``.000`` fractions."""

    entries = decode_history(
        '[{"amount": 250, "isIncome": true, "description": "Gift",'
        ' "timestamp": "2024-03-01T12:00:00.000"}]'
    )
    assert entries == [TransactionEntry(250.0, TransactionKind.INCOME, "Gift", datetime(2024, 3, 1, 12))]


def test_decode_empty_array() -> None:
    assert decode_history("[]") == []


@pytest.mark.parametrize(
    "blob",
    [
        "",
        "{broken",
        '{"amount": 1}',
        '[{"amount": 1, "isIncome": "yes", "description": "", "timestamp": "2024-01-01T00:00:00"}]',
        '[{"amount": 1, "isIncome": true, "description": "", "timestamp": "yesterday"}]',
        '[{"isIncome": true, "description": "", "timestamp": "2024-01-01T00:00:00"}]',
        '[{"amount": -5, "isIncome": true, "description": "", "timestamp": "2024-01-01T00:00:00"}]',
        '[{"amount": 0, "isIncome": false, "description": "", "timestamp": "2024-01-01T00:00:00"}]',
        '[{"amount": "NaN", "isIncome": true, "description": "", "timestamp": "2024-01-01T00:00:00"}]',
        '[{"amount": "Infinity", "isIncome": true, "description": "", "timestamp": "2024-01-01T00:00:00"}]',
    ],
)
def test_decode_rejects_malformed_blobs(blob: str) -> None:
    with pytest.raises(HistoryDecodeError):
        decode_history(blob)
