"""Half-up rounding shared by the metrics (2.5 -> 3, 0.125 -> 0.13)."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return math.floor(value + 0.5)


def round_half_up_to(value: float, digits: int) -> float:
    """Round to *digits* decimals with halves going up (53.125 -> 53.13 for 2 digits)."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
