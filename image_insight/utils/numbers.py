"""Rounding helpers that round ties away from zero instead of to even."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """Round to the nearest integer, sending ``x.5`` upwards (12.5 -> 13)."""
    return math.floor(value + 0.5)


def format_fixed(value: float, digits: int = 2) -> str:
    """Format ``value`` with exactly ``digits`` decimals, ties rounded up.

    The exact binary value of the float is rounded, so ``1.125`` becomes
    ``"1.13"`` while ``1.005`` (stored slightly below) becomes ``"1.00"``.
    """
    quantum = Decimal(1).scaleb(-digits)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:.{digits}f}"
