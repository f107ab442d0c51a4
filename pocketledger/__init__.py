"""Mini README: Core package initializer for pocketledger.

pocketledger keeps a personal income/expense ledger on disk and turns its
history into cumulative weekly, 30 day and all-time trend series. The
package root only re-exports the logging factory so importing it stays
cheap; the ledger, storage and reports live in their own subpackages.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
