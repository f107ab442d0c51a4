"""Mini README: Entry point CLI for pocketledger.

This script exposes a Typer CLI for recording income and expenses,
inspecting totals, history and trend reports, clearing the ledger and
starting the FastAPI service. Every command opens the ledger configured
through ``POCKETLEDGER_*`` environment variables.
"""

from __future__ import annotations

from datetime import date

import typer
import uvicorn

from pocketledger.bootstrap import open_ledger
from pocketledger.configuration import get_settings
from pocketledger.interface import parse_amount
from pocketledger.ledger import LedgerStore
from pocketledger.logging_utils import configure_root_logger
from pocketledger.reports import ReportMode, bucket_labels, build_series, summarise_state

cli = typer.Typer(help="Record income and expenses and inspect spending trends.")


def _open() -> LedgerStore:
    settings = get_settings()
    configure_root_logger(settings.log_level)
    return open_ledger(settings)


def _amount(value: str) -> float:
    try:
        return parse_amount(value)
    except ValueError as error:
        raise typer.BadParameter(str(error), param_hint="AMOUNT") from error


def _echo_summary(store: LedgerStore) -> None:
    summary = summarise_state(store.state)
    typer.echo(f"Total income:   {summary['total_income']:,.2f}")
    share = summary["today_share_percent"]
    typer.echo(
        f"Today's income: {summary['today_income']:,.2f}"
        + (f" ({share}% of total)" if share is not None else "")
    )
    typer.echo(f"Last change:    {summary['last_mutation_time']}")
    typer.echo(f"Entries kept:   {summary['history_size']}")


@cli.command()
def income(
    amount: str = typer.Argument(..., help="Positive amount to add."),
    description: str = typer.Option("", "--description", "-d", help="Optional label."),
) -> None:
    """Record an income entry."""

    value = _amount(amount)
    store = _open()
    store.record_income(value, description.strip())
    typer.echo(f"Added income of {value:,.2f}")
    _echo_summary(store)


@cli.command()
def expense(
    amount: str = typer.Argument(..., help="Positive amount to subtract."),
    description: str = typer.Option("", "--description", "-d", help="Optional label."),
) -> None:
    """Record an expense entry; totals never drop below zero."""

    value = _amount(amount)
    store = _open()
    store.record_expense(value, description.strip())
    typer.echo(f"Recorded expense of {value:,.2f}")
    _echo_summary(store)


@cli.command()
def show() -> None:
    """Print the current totals."""

    store = _open()
    _echo_summary(store)
    metadata = store.backend.metadata()
    typer.echo(f"Storage:        {metadata['backend']} ({metadata['location']})")


@cli.command()
def history(
    limit: int = typer.Option(10, min=1, help="Number of entries to list."),
) -> None:
    """List the most recent entries, newest first."""

    entries = _open().state.history[:limit]
    if not entries:
        typer.echo("No transactions recorded yet.")
        return
    for entry in entries:
        sign = "+" if entry.is_income else "-"
        typer.echo(
            f"{entry.timestamp:%Y-%m-%d %H:%M}  {sign}{entry.amount:,.2f}  {entry.description}".rstrip()
        )


@cli.command()
def report(
    mode: str = typer.Argument("weekly", help="weekly, monthly or all-time."),
) -> None:
    """Print a cumulative trend series."""

    try:
        report_mode = ReportMode.from_str(mode)
    except ValueError as error:
        raise typer.BadParameter(str(error), param_hint="MODE") from error

    today = date.today()
    entries = _open().state.history
    series = build_series(report_mode, entries, today)
    if not series:
        typer.echo("No transactions recorded yet.")
        return
    typer.echo(f"{report_mode.value} report ({', '.join(bucket_labels(report_mode, entries, today))})")
    for index, value in series.items():
        typer.echo(f"{index:>3}  {value:,.2f}")


@cli.command()
def reset(
    yes: bool = typer.Option(False, "--yes", help="Confirm clearing every total and entry."),
) -> None:
    """Erase totals, history and the persisted copy."""

    if not yes:
        typer.echo("Refusing to clear the ledger without --yes.")
        raise typer.Exit(code=1)
    _open().reset()
    typer.echo("Ledger cleared.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # 0.0.0.0 is not browsable; point people at localhost instead.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting pocketledger on {effective_host}:{effective_port}.\n"
        f"API available at http://{browser_host}:{effective_port}/state"
    )
    uvicorn.run(
        "pocketledger.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
