# seriesmath

A small set of elementary math functions that work their results out by
summing series and iterating, instead of calling into the platform's
math library for the answer.

- `seriesmath.exponential.exp(x)`: e raised to the power `x`, summed from
  its Taylor series. Negative arguments are computed as the reciprocal of
  the positive one.
- `seriesmath.exponential.log(x)`: the natural logarithm. The argument is
  first divided by e until it falls below e, and the rest is refined
  iteratively against `exp`.
- `seriesmath.basic.fabs(x)`: the absolute value of a float.
- `seriesmath.basic.fmod(x, y)`: the remainder of `x / y`, with the
  quotient truncated towards zero, so the result has the sign of `x`.

Every function accepts anything `float()` accepts and returns a `float`.

## Special values

No exceptions are raised for domain errors. NaN and infinities are
returned instead:

| Call | Result |
| --- | --- |
| `exp(x)` with `x > 11355` | `inf` |
| `exp(x)` with `x < -11355` | `0.0` |
| `log(0.0)` | `-inf` |
| `log(1.0)` | `0.0` |
| `log(inf)` | `inf` |
| `log(x)` with `x` negative or NaN | `nan` |
| `fabs(nan)` | `nan` |
| `fabs(-inf)` | `inf` |
| `fmod(x, y)` with `x` infinite or NaN, `y` NaN, or `y == 0` | `nan` |
| `fmod(x, inf)` | `x` |

## Installation

```
pip install seriesmath
```

## Usage

```python
from seriesmath.exponential import exp, log
from seriesmath.basic import fabs, fmod

exp(1.0)          # 2.718281828...
log(100.0)        # 4.605170185...
log(0.0)          # -inf
fabs(-3.5)        # 3.5
fmod(7.5, 2.0)    # 1.5
fmod(-7.5, 2.0)   # -1.5
fmod(1.0, 0.0)    # nan
```

## What it does not provide

The package offers only the four functions above. It has no trigonometric,
power, square-root or rounding functions, and no command-line tool.

## Running the tests

```
pip install "seriesmath[test]"
pytest
```