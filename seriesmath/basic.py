"""Absolute value and floating-point remainder."""

import math


def fabs(x):
    """Return the absolute value of ``x``; NaN stays NaN."""
    x = float(x)
    if math.isinf(x):
        return math.inf
    if math.isnan(x):
        return math.nan
    return -x if x < 0 else x


def _truncate(value):
    if not math.isfinite(value):
        return value
    return float(math.floor(value)) if value > 0 else float(math.ceil(value))


def fmod(x, y):
    """Return the remainder of ``x / y`` with the sign of ``x``.

    The result is NaN when ``x`` is infinite or NaN, ``y`` is NaN,
    or ``y`` is zero. An infinite ``y`` leaves ``x`` unchanged.
    """
    x = float(x)
    y = float(y)
    if math.isinf(x) or math.isnan(x) or math.isnan(y) or y == 0:
        return math.nan
    if math.isinf(y):
        return x
    return x - _truncate(x / y) * y