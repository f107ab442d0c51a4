"""Mini README: Tests for the cumulative report series.

Structure:
    * weekly tests - Monday based buckets within the current week.
    * monthly tests - rolling 30 day window ending today.
    * all-time tests - calendar month buckets over the whole history.
    * helper tests - dispatch, labels and purity.
"""

from __future__ import annotations

from datetime import date, datetime

import pytest

from pocketledger.ledger import TransactionEntry, TransactionKind
from pocketledger.reports import (
    ReportMode,
    all_time_series,
    bucket_labels,
    build_series,
    monthly_series,
    weekly_series,
)

# A Wednesday; the surrounding week starts on Monday 2024-05-13.
TODAY = date(2024, 5, 15)


def _income(amount: float, moment: datetime, description: str = "") -> TransactionEntry:
    return TransactionEntry(amount, TransactionKind.INCOME, description, moment)


def _expense(amount: float, moment: datetime, description: str = "") -> TransactionEntry:
    return TransactionEntry(amount, TransactionKind.EXPENSE, description, moment)


def test_weekly_series_empty_history_is_all_zero() -> None:
    assert weekly_series([], TODAY) == {index: 0.0 for index in range(7)}


def test_weekly_series_single_income_steps_up_on_its_day() -> None:
    history = [_income(80.0, datetime(2024, 5, 15, 14, 0))]

    series = weekly_series(history, TODAY)

    assert list(series) == list(range(7))
    assert [series[index] for index in range(7)] == [0.0, 0.0, 80.0, 80.0, 80.0, 80.0, 80.0]


def test_weekly_series_accumulates_signed_daily_nets() -> None:
    history = [
        _expense(30.0, datetime(2024, 5, 19, 23, 59)),
        _expense(20.0, datetime(2024, 5, 14, 18, 0)),
        _income(100.0, datetime(2024, 5, 13, 0, 0)),
        _income(500.0, datetime(2024, 5, 12, 12, 0)),
    ]

    series = weekly_series(history, TODAY)

    assert series == {0: 100.0, 1: 80.0, 2: 80.0, 3: 80.0, 4: 80.0, 5: 80.0, 6: 50.0}


def test_weekly_series_ignores_entries_before_monday() -> None:
    """Earlier history is invisible; the series starts from zero."""

    history = [_income(999.0, datetime(2024, 5, 10, 9, 0))]
    assert set(weekly_series(history, TODAY).values()) == {0.0}


def test_weekly_series_on_monday_and_sunday() -> None:
    history = [_income(10.0, datetime(2024, 5, 13, 8, 0))]
    assert weekly_series(history, date(2024, 5, 13))[0] == pytest.approx(10.0)
    assert weekly_series(history, date(2024, 5, 19))[0] == pytest.approx(10.0)
    assert weekly_series(history, date(2024, 5, 20))[0] == 0.0


def test_zero_net_day_keeps_running_total() -> None:
    history = [
        _income(40.0, datetime(2024, 5, 14, 9, 0)),
        _expense(40.0, datetime(2024, 5, 14, 10, 0)),
        _income(15.0, datetime(2024, 5, 13, 9, 0)),
    ]
    series = weekly_series(history, TODAY)
    assert series[0] == pytest.approx(15.0)
    assert series[1] == pytest.approx(15.0)


def test_monthly_series_has_thirty_buckets_ending_today() -> None:
    history = [
        _income(50.0, datetime(2024, 5, 15, 7, 0)),
        _income(25.0, datetime(2024, 4, 16, 7, 0)),
        _income(1000.0, datetime(2024, 4, 15, 7, 0)),
    ]

    series = monthly_series(history, TODAY)

    assert len(series) == 30
    assert series[0] == pytest.approx(25.0)
    assert series[28] == pytest.approx(25.0)
    assert series[29] == pytest.approx(75.0)


def test_monthly_series_single_income_on_bucket_k() -> None:
    history = [_income(12.5, datetime(2024, 5, 1, 12, 0))]

    series = monthly_series(history, TODAY)

    k = 15  # 2024-05-01 is 14 days before 2024-05-15
    assert all(series[index] == 0.0 for index in range(k))
    assert all(series[index] == pytest.approx(12.5) for index in range(k, 30))


def test_monthly_series_spans_month_boundary() -> None:
    history = [_expense(5.0, datetime(2024, 2, 29, 12, 0))]
    series = monthly_series(history, date(2024, 3, 1))
    assert series[28] == pytest.approx(-5.0)
    assert series[29] == pytest.approx(-5.0)


def test_all_time_series_empty_history_is_empty() -> None:
    assert all_time_series([]) == {}


def test_all_time_series_two_months() -> None:
    history = [
        _income(200.0, datetime(2024, 3, 2, 9, 0)),
        _expense(80.0, datetime(2024, 2, 20, 9, 0)),
        _income(30.0, datetime(2024, 2, 3, 9, 0)),
    ]
    assert all_time_series(history) == {0: -50.0, 1: 150.0}


def test_all_time_series_sorts_across_years_and_skips_empty_months() -> None:
    history = [
        _income(10.0, datetime(2024, 1, 5)),
        _income(1.0, datetime(2023, 12, 5)),
        _expense(1.0, datetime(2023, 11, 5)),
        _income(5.0, datetime(2023, 6, 5)),
    ]
    assert all_time_series(history) == {0: 5.0, 1: 4.0, 2: 5.0, 3: 15.0}


def test_all_time_series_keeps_zero_net_month() -> None:
    history = [
        _expense(10.0, datetime(2024, 2, 2)),
        _income(10.0, datetime(2024, 2, 1)),
        _income(7.0, datetime(2024, 1, 1)),
    ]
    assert all_time_series(history) == {0: 7.0, 1: 7.0}


def test_reports_are_idempotent() -> None:
    history = [_income(3.0, datetime(2024, 5, 14)), _expense(1.0, datetime(2024, 4, 30))]
    for mode in ReportMode:
        first = build_series(mode, history, TODAY)
        second = build_series(mode, history, TODAY)
        assert first == second
        assert first is not second


def test_build_series_dispatches_by_mode() -> None:
    history = [_income(3.0, datetime(2024, 5, 14))]
    assert build_series(ReportMode.WEEKLY, history, TODAY) == weekly_series(history, TODAY)
    assert build_series(ReportMode.MONTHLY, history, TODAY) == monthly_series(history, TODAY)
    assert build_series(ReportMode.ALL_TIME, history, TODAY) == {0: 3.0}


def test_report_mode_from_str() -> None:
    assert ReportMode.from_str("Weekly") is ReportMode.WEEKLY
    assert ReportMode.from_str("all-time") is ReportMode.ALL_TIME
    with pytest.raises(ValueError):
        ReportMode.from_str("yearly")


def test_bucket_labels() -> None:
    history = [_income(1.0, datetime(2024, 4, 2)), _income(1.0, datetime(2023, 11, 2))]

    assert bucket_labels(ReportMode.WEEKLY, history, TODAY) == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert bucket_labels(ReportMode.MONTHLY, history, TODAY) == ["16", "21", "26", "1", "6", "11"]
    assert bucket_labels(ReportMode.ALL_TIME, history, TODAY) == ["2023-11", "2024-04"]


def test_datetime_today_is_treated_as_its_date() -> None:
    """A datetime reference point buckets exactly like its calendar date."""

    history = [_income(80.0, datetime(2024, 5, 15, 14, 0)), _expense(5.0, datetime(2024, 5, 1, 9, 0))]
    moment = datetime(2024, 5, 15, 18, 45)

    assert weekly_series(history, moment) == weekly_series(history, TODAY)
    assert monthly_series(history, moment) == monthly_series(history, TODAY)
    assert monthly_series(history, moment)[29] == pytest.approx(75.0)
    assert bucket_labels(ReportMode.MONTHLY, history, moment) == bucket_labels(ReportMode.MONTHLY, history, TODAY)
