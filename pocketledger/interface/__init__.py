"""Mini README: Interactive interfaces (web/CLI) for pocketledger.

Exports the FastAPI application factory and the boundary validation
helpers shared with the Typer CLI in ``main_ledger.py``.
"""

from .inputs import parse_amount
from .web_app import create_application

__all__ = ["create_application", "parse_amount"]
