"""Mini README: Dashboard summary built from a ledger snapshot.

Structure:
    * summarise_state - headline figures for the CLI and web interfaces.
"""

from __future__ import annotations

from typing import Any, Dict

from ..ledger.models import LedgerState


def summarise_state(state: LedgerState) -> Dict[str, Any]:
    """Aggregate headline figures for display.

    ``today_share_percent`` is today's income as a share of the total,
    rounded to one decimal, or ``None`` while the total is zero.
    """

    today_share = None
    if state.total_income > 0:
        today_share = round(state.today_income / state.total_income * 100, 1)

    latest = state.history[0] if state.history else None
    return {
        "total_income": state.total_income,
        "today_income": state.today_income,
        "today_share_percent": today_share,
        "last_mutation_time": state.last_mutation_time,
        "history_size": len(state.history),
        "latest_description": latest.description if latest else "",
        "latest_timestamp": latest.timestamp.isoformat() if latest else "",
    }
