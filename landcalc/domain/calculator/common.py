"""Numeric helpers shared by the calculators."""

from __future__ import annotations

import math
from typing import Any


def round_half_up(value: float) -> int:
    """Round half up to an integer, the way the displayed figures are rounded."""
    return int(math.floor(value + 0.5))


def round_currency(value: float) -> int:
    """Round to the nearest currency unit."""
    return round_half_up(value)


def as_amount(value: Any) -> float:
    """Coerce to a finite float; anything else becomes 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
