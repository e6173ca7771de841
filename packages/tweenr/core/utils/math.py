"""Math utilities shared by the curve evaluators."""

from __future__ import annotations

import sys
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)

# Comparing spring rates against float64 epsilon is too strict; the float32
# machine epsilon is used as tolerance even though the math is done in doubles.
F32_EPSILON: float = float(np.finfo(np.float32).eps)
F64_EPSILON: float = sys.float_info.epsilon


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


def safe_ratio(numerator: float, denominator: float, *, default: float) -> float:
    """Divide, returning ``default`` when the result is not finite.

    Args:
        numerator: Dividend
        denominator: Divisor
        default: Value used for zero-width or degenerate divisions

    Returns:
        ``numerator / denominator`` or ``default``
    """
    if denominator == 0.0:
        return default
    result = numerator / denominator
    if not np.isfinite(result):
        return default
    return float(result)
