"""The three Hydra curve components.

Each maps a normalized non-negative fixed-point input to a value in
[0, PRECISION] under one shape parameter:

- sigmoid: rises from ONE/2 toward ONE; steepness sets how fast
- gaussian: bell that decays from ONE toward 0; width sets the spread
- rational: 1 / (1 + x^power); power sets the tail

An input of 0 (parity) maps to exactly PRECISION for all three.
"""

from hydra.constants import DEFAULT_EXP_TERMS, PRECISION
from hydra.errors import InvalidInput, MathOverflow
from hydra.math.fixed_point import ONE_36, exp, mul_div, pow_fixed
from hydra.safe_int import S

# Widths beyond which the gaussian is exactly 0 (7^2 = 49 > 41)
GAUSSIAN_CUTOFF = 7


def sigmoid(x: int, steepness: int, *, terms: int = DEFAULT_EXP_TERMS) -> int:
    """Logistic component: ONE^2 / (ONE + e^(-steepness * x)).

    Args:
        x: Normalized input, 18-decimal fixed-point
        steepness: Plain integer slope
        terms: Taylor terms forwarded to exp()

    Returns:
        Value in [ONE/2, ONE]; ONE at x == 0, ONE/2 when steepness is 0

    Raises:
        InvalidInput: If x or steepness is negative
        MathOverflow: If steepness * x exceeds 2^256-1
    """
    if x < 0 or steepness < 0:
        raise InvalidInput(f"sigmoid requires non-negative input, got x={x} steepness={steepness}")
    if x == 0:
        return PRECISION
    if steepness == 0:
        return PRECISION // 2

    scaled = (S(x) * steepness).value
    decay = exp(-scaled, terms)
    return ONE_36 // (PRECISION + decay)


def gaussian(x: int, width: int, *, terms: int = DEFAULT_EXP_TERMS) -> int:
    """Bell component: e^(-(x / width)^2).

    Args:
        x: Normalized input, 18-decimal fixed-point
        width: Spread, 18-decimal fixed-point
        terms: Taylor terms forwarded to exp()

    Returns:
        Value in [0, ONE]; ONE at x == 0, 0 when width is 0

    Raises:
        InvalidInput: If x or width is negative
        MathOverflow: If x * ONE exceeds 2^256-1 while x is within
            GAUSSIAN_CUTOFF widths
    """
    if x < 0 or width < 0:
        raise InvalidInput(f"gaussian requires non-negative input, got x={x} width={width}")
    if x == 0:
        return PRECISION
    if width == 0:
        return 0

    # Past the cutoff (x / width)^2 > 41, where exp() has decayed to 0
    if x // width >= GAUSSIAN_CUTOFF:
        return 0

    ratio = mul_div(x, PRECISION, width)
    exponent = mul_div(ratio, ratio, PRECISION)
    return exp(-exponent, terms)


def rational(x: int, power: int) -> int:
    """Tail component: ONE^2 / (ONE + x^power).

    A power that overflows degrades to 0 instead of raising; for such x
    the true value is already indistinguishable from 0.

    Args:
        x: Normalized input, 18-decimal fixed-point
        power: Plain integer exponent in [0, 32]

    Returns:
        Value in [0, ONE]; ONE at x == 0 or power == 0

    Raises:
        InvalidInput: If x is negative or power is outside [0, 32]
    """
    if x < 0:
        raise InvalidInput(f"rational requires non-negative input, got x={x}")
    if x == 0 or power == 0:
        return PRECISION

    try:
        denominator = S(PRECISION) + pow_fixed(x, power)
    except MathOverflow:
        return 0
    return ONE_36 // denominator.value
