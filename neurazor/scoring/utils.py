"""
Numeric Utilities
neurazor/scoring/utils.py

Float helpers for the formula evaluators. None of them raise: degenerate
inputs produce IEEE infinities or NaN, which `clamp` absorbs.
"""

import math
from typing import Iterable

_OVERFLOW_SCALE = 2.0 ** -64


def clamp(value: float, min_val: float = 0.0, max_val: float = 100.0) -> float:
    """Clamp value to range [min_val, max_val]. NaN maps to min_val."""
    if math.isnan(value):
        return min_val
    return max(min_val, min(max_val, value))


def ratio(numerator: float, denominator: float) -> float:
    """
    Divide without raising.

    x / 0 gives +inf or -inf by the sign of x, 0 / 0 gives NaN.
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def exact_sum(values: Iterable[float]) -> float:
    """
    Sum independent of the order of ``values``.

    Formula: math.fsum over finite values; any NaN, or +inf together with
    -inf, yields NaN; otherwise a single infinity wins. A total beyond the
    float range becomes +inf or -inf.
    """
    finite = []
    has_pos_inf = has_neg_inf = False
    for v in values:
        if math.isnan(v):
            return math.nan
        if math.isinf(v):
            if v > 0:
                has_pos_inf = True
            else:
                has_neg_inf = True
            continue
        finite.append(v)

    if has_pos_inf and has_neg_inf:
        return math.nan
    if has_pos_inf:
        return math.inf
    if has_neg_inf:
        return -math.inf
    try:
        return math.fsum(finite)
    except OverflowError:
        # Partial sums overflowed; rescale so only an out-of-range total is infinite
        return math.fsum(v * _OVERFLOW_SCALE for v in finite) / _OVERFLOW_SCALE
