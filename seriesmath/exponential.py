"""Exponential and natural logarithm computed from power series."""

import math

_EXP_LIMIT = 11355.0
_SERIES_TERMS = 500
_LOG_ITERATIONS = 500


def exp(x):
    """Return e raised to the power ``x``.

    Above 11355 the result is infinity and below -11355 it is zero.
    Negative arguments are computed as the reciprocal of the positive one.
    """
    x = float(x)
    if x > _EXP_LIMIT:
        return math.inf
    if x < -_EXP_LIMIT:
        return 0.0
    if x < 0:
        return 1.0 / exp(-x)

    result = 1.0
    term = 1.0
    for i in range(1, _SERIES_TERMS):
        term *= x / i
        updated = result + term
        # Once terms shrink and stop changing the sum, the rest add nothing.
        if i > x and updated == result:
            break
        result = updated
    return result


def log(x):
    """Return the natural logarithm of ``x``.

    NaN and negative input give NaN, infinity gives infinity,
    one gives zero and zero gives negative infinity.
    """
    x = float(x)
    if math.isnan(x) or x < 0:
        return math.nan
    if math.isinf(x):
        return math.inf
    if x == 1:
        return 0.0
    if x == 0:
        return -math.inf

    degree = 0
    while x >= math.e:
        x /= math.e
        degree += 1

    estimate = 0.0
    for _ in range(_LOG_ITERATIONS):
        power = exp(estimate)
        refined = estimate + 2 * (x - power) / (x + power)
        if refined == estimate:
            break
        estimate = refined
    return estimate + degree