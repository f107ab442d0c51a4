"""Mini README: Boundary validation for user supplied values.

The ledger store trusts its callers, so the CLI and the web routes run
raw input through these helpers first.
"""

from __future__ import annotations

import math
from typing import Union


def parse_amount(value: Union[str, float, int]) -> float:
    """Return ``value`` as a positive finite float or raise ``ValueError``."""

    if isinstance(value, bool):
        raise ValueError("Amount must be a number")
    try:
        amount = float(value.strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError) as error:
        raise ValueError(f"Amount must be a number, got {value!r}") from error
    if not math.isfinite(amount):
        raise ValueError("Amount must be finite")
    if amount <= 0:
        raise ValueError("Amount must be greater than zero")
    return amount
