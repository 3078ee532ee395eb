"""Float helpers that never raise on zero, NaN or infinite input."""

import math


def is_number(value: float) -> bool:
    """Return True for a finite float (not NaN, not +/-inf)."""
    return isinstance(value, (int, float)) and math.isfinite(value)


def safe_ratio(numerator: float, denominator: float) -> float:
    """
    Return numerator / denominator, or 0.0 when the denominator is zero.

    NaN in either operand propagates as NaN.
    """
    if denominator == 0:
        return 0.0
    return numerator / denominator
