"""Mini README: Cumulative trend series derived from the ledger history.

Structure:
    * ReportMode - enum naming the three report views.
    * weekly_series - Monday..Sunday of the current week.
    * monthly_series - rolling 30 days ending today.
    * all_time_series - one bucket per calendar month present in history.
    * build_series / bucket_labels - dispatch helpers for the interfaces.

Every series maps a 0-based bucket index (oldest first) to the running sum
of signed amounts up to and including that bucket. The weekly and monthly
views only look at entries inside their window and start from zero, so
they show the net change within the window rather than the balance.
All functions are pure; each call builds a fresh dict.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from enum import Enum
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..ledger.models import TransactionEntry

WEEK_LENGTH = 7
ROLLING_WINDOW_DAYS = 30
MONTHLY_LABEL_STEP = 5
WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

Series = Dict[int, float]


class ReportMode(str, Enum):
    """Supported report views."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    ALL_TIME = "all_time"

    @classmethod
    def from_str(cls, value: str) -> "ReportMode":
        """Accept ``all-time`` and ``all_time`` in any casing."""

        try:
            return cls(value.strip().lower().replace("-", "_"))
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported report mode: {value}") from error


def _cumulative(deltas: Sequence[float]) -> Series:
    running = np.cumsum(np.asarray(deltas, dtype=float))
    return {index: float(value) for index, value in enumerate(running)}


def _daily_net(history: Sequence[TransactionEntry], day: date) -> float:
    return sum(entry.signed_amount for entry in history if entry.timestamp.date() == day)


def _resolve_today(today: Optional[date]) -> date:
    """Default to the current date and drop any time component."""

    if today is None:
        return date.today()
    return today.date() if isinstance(today, datetime) else today


def _week_days(today: date) -> List[date]:
    monday = today - timedelta(days=today.weekday())
    return [monday + timedelta(days=offset) for offset in range(WEEK_LENGTH)]


def _window_days(today: date) -> List[date]:
    return [today - timedelta(days=ROLLING_WINDOW_DAYS - 1 - offset) for offset in range(ROLLING_WINDOW_DAYS)]


def month_key(entry: TransactionEntry) -> str:
    """Zero padded ``YYYY-MM`` key so lexical order is chronological."""

    return f"{entry.timestamp.year:04d}-{entry.timestamp.month:02d}"


def _monthly_nets(history: Sequence[TransactionEntry]) -> Dict[str, float]:
    totals: Dict[str, float] = {}
    for entry in history:
        key = month_key(entry)
        totals[key] = totals.get(key, 0.0) + entry.signed_amount
    return totals


def weekly_series(history: Sequence[TransactionEntry], today: Optional[date] = None) -> Series:
    """Cumulative net for each day of the current ISO week."""

    today = _resolve_today(today)
    return _cumulative([_daily_net(history, day) for day in _week_days(today)])


def monthly_series(history: Sequence[TransactionEntry], today: Optional[date] = None) -> Series:
    """Cumulative net for each of the last 30 days, today last."""

    today = _resolve_today(today)
    return _cumulative([_daily_net(history, day) for day in _window_days(today)])


def all_time_series(history: Sequence[TransactionEntry]) -> Series:
    """Cumulative net per calendar month; empty when there is no history."""

    if not history:
        return {}
    totals = _monthly_nets(history)
    return _cumulative([totals[key] for key in sorted(totals)])


def build_series(
    mode: ReportMode,
    history: Sequence[TransactionEntry],
    today: Optional[date] = None,
) -> Series:
    """Return the series for ``mode``."""

    if mode is ReportMode.WEEKLY:
        return weekly_series(history, today)
    if mode is ReportMode.MONTHLY:
        return monthly_series(history, today)
    return all_time_series(history)


def bucket_labels(
    mode: ReportMode,
    history: Sequence[TransactionEntry],
    today: Optional[date] = None,
) -> List[str]:
    """Axis labels for a report.

    Weekly reports label every day, the 30 day view labels every fifth day
    starting with the oldest bucket, and the all-time view uses the month
    keys in bucket order.
    """

    today = _resolve_today(today)
    if mode is ReportMode.WEEKLY:
        return list(WEEKDAY_LABELS)
    if mode is ReportMode.MONTHLY:
        days = _window_days(today)
        return [str(days[index].day) for index in range(0, ROLLING_WINDOW_DAYS, MONTHLY_LABEL_STEP)]
    return sorted(_monthly_nets(history))
