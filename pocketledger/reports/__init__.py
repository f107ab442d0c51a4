"""Mini README: Reporting helpers for pocketledger.

``aggregator`` turns the transaction history into cumulative weekly,
30 day and all-time series; ``summary`` builds the headline figures.
"""

from .aggregator import (
    ReportMode,
    all_time_series,
    bucket_labels,
    build_series,
    monthly_series,
    weekly_series,
)
from .summary import summarise_state

__all__ = [
    "ReportMode",
    "all_time_series",
    "bucket_labels",
    "build_series",
    "monthly_series",
    "summarise_state",
    "weekly_series",
]
