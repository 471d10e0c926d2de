import math

import pytest

from seriesmath.basic import fabs, fmod

NAN_FMOD_INPUTS = [
    (math.inf, 1.0),
    (-math.inf, 1.0),
    (math.nan, 1.0),
    (1.0, math.nan),
    (1.0, 0.0),
    (1.0, -0.0),
]


@pytest.mark.parametrize("x", [-3.5, 3.5, -1e300, 1e-300, 7])
def test_fabs_matches_reference(x):
    assert fabs(x) == math.fabs(x)


def test_fabs_is_non_negative_for_negatives():
    for x in (-0.25, -2.0, -123456.789):
        assert fabs(x) == -x


@pytest.mark.parametrize("x", [math.inf, -math.inf])
def test_fabs_of_infinity(x):
    assert fabs(x) == math.inf


def test_fabs_of_nan():
    assert math.isnan(fabs(math.nan))


@pytest.mark.parametrize("x, y", [(7.0, 3.0), (-7.0, 3.0), (9.75, -2.5), (-100.0, 7.0)])
def test_fmod_result_keeps_sign_and_is_smaller(x, y):
    result = fmod(x, y)
    assert abs(result) < abs(y)
    assert result == 0 or math.copysign(1.0, result) == math.copysign(1.0, x)


@pytest.mark.parametrize("x, y", NAN_FMOD_INPUTS)
def test_fmod_gives_nan(x, y):
    result = fmod(x, y)
    assert math.isnan(result) is True
    assert repr(float(result)) == "nan"


@pytest.mark.parametrize("y", [math.inf, -math.inf])
def test_fmod_by_infinity_returns_dividend(y):
    assert fmod(5.5, y) == 5.5


def test_fmod_of_exact_multiple_is_zero():
    assert fmod(9.0, 3.0) == 0.0