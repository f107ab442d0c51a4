"""Mini README: FastAPI service exposing the ledger as a JSON API.

Structure:
    * create_application - application factory wiring routes to a ledger.
    * Routes - state summary, history, trend reports, recording and reset.

The factory accepts an already built ``LedgerStore`` so tests can inject a
memory-backed ledger; without one it opens the configured ledger. The
store is kept on ``app.state.ledger``; while the app is running a
listener logs every change and is removed again on shutdown.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import date
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import FastAPI, Form, HTTPException, Query
from fastapi.responses import JSONResponse

from ..bootstrap import open_ledger
from ..ledger import LedgerState, LedgerStore, TransactionKind
from ..logging_utils import get_logger
from ..reports import ReportMode, bucket_labels, build_series, summarise_state
from .inputs import parse_amount

LOGGER = get_logger(__name__)


def _log_state_change(state: LedgerState) -> None:
    LOGGER.debug(
        "Ledger state changed -> total: %.2f today: %.2f entries: %s",
        state.total_income,
        state.today_income,
        len(state.history),
    )


def _state_payload(store: LedgerStore) -> Dict[str, Any]:
    payload = summarise_state(store.state)
    payload["storage"] = store.backend.metadata()
    return payload


def create_application(store: Optional[LedgerStore] = None) -> FastAPI:
    """Create the FastAPI application with routes bound to ``store``."""

    ledger = store or open_ledger()

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        unsubscribe = ledger.subscribe(_log_state_change)
        try:
            yield
        finally:
            unsubscribe()

    app = FastAPI(title="pocketledger", version="0.1.0", lifespan=lifespan)
    app.state.ledger = ledger

    @app.get("/state")
    async def state() -> JSONResponse:
        """Return headline totals and storage details."""

        return JSONResponse(_state_payload(ledger))

    @app.get("/history")
    async def history(limit: Optional[int] = Query(None, ge=1)) -> JSONResponse:
        """Return recorded entries, newest first."""

        entries = ledger.state.history
        if limit is not None:
            entries = entries[:limit]
        LOGGER.debug("Returning %s history entries", len(entries))
        return JSONResponse({"entries": [entry.as_dict() for entry in entries]})

    @app.get("/reports/{mode}")
    async def report(mode: str) -> JSONResponse:
        """Return a cumulative trend series and its axis labels."""

        try:
            report_mode = ReportMode.from_str(mode)
        except ValueError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        today = date.today()
        history = ledger.state.history
        series = build_series(report_mode, history, today)
        return JSONResponse(
            {
                "mode": report_mode.value,
                "points": [{"index": index, "value": value} for index, value in series.items()],
                "labels": bucket_labels(report_mode, history, today),
            }
        )

    @app.post("/transactions")
    async def record_transaction(
        kind: str = Form(...),
        amount: str = Form(...),
        description: str = Form(""),
    ) -> JSONResponse:
        """Record an income or expense after validating the form input."""

        try:
            transaction_kind = TransactionKind.from_str(kind)
            parsed_amount = parse_amount(amount)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error

        if transaction_kind is TransactionKind.INCOME:
            ledger.record_income(parsed_amount, description.strip())
        else:
            ledger.record_expense(parsed_amount, description.strip())
        LOGGER.info("Recorded %s via web interface", transaction_kind.value)
        return JSONResponse(
            {"entry": ledger.state.history[0].as_dict(), "state": _state_payload(ledger)},
            status_code=201,
        )

    @app.post("/reset")
    async def reset() -> JSONResponse:
        """Clear the ledger and its persisted copy."""

        ledger.reset()
        LOGGER.warning("Ledger cleared via web interface")
        return JSONResponse(_state_payload(ledger))

    return app
