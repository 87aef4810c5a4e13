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


def lerp(a: Number, b: Number, t: float) -> float:
    """Linear interpolation between a and b.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor [0, 1]

    Returns:
        Interpolated value
    """
    return float(a) + (float(b) - float(a)) * t


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves rounding towards +infinity.

    Matches the frame rounding every timing helper uses, so 14.5 -> 15 and
    -0.5 -> 0 (Python's round() would give banker's rounding instead).
    """
    return math.floor(x + 0.5)


def frac(x: float) -> float:
    """Fractional part in [0, 1), i.e. x - floor(x)."""
    return x - math.floor(x)


def wrap(value: float, period: float) -> float:
    """Non-negative modulo: result always lies in [0, period)."""
    return ((value % period) + period) % period


def is_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)
