"""Math utilities for common operations."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def clamp01(value: float) -> float:
    """Clamp value to [0, 1]; NaN maps to 0."""
    if math.isnan(value):
        return 0.0
    return float(clamp(value, 0.0, 1.0))


def non_negative(value: float, default: float = 0.0) -> float:
    """Return value if it is a finite number >= 0, else ``default``."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number) or number < 0:
        return default
    return number


def seconds_to_ms(seconds: float) -> int:
    """Convert seconds to whole milliseconds (timer granularity)."""
    return int(round(non_negative(seconds) * 1000))
