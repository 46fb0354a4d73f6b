"""Hydra fixed-point math library.

Integer-only primitives for the blended curve: square root, bounded
exponential and bounded integer power. All values are integers scaled by
10^18. No floating point is used anywhere; the lossy behaviors below are
part of the contract and must not be "fixed":

- exp() decays to 0 below -41 and saturates at 2^128-1 above 50
- exp() is a truncated Taylor series (3-6 terms); fewer terms trade
  precision for cost
- pow_fixed() refuses exponents above 32 instead of evaluating them
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

from hydra.constants import (
    DEFAULT_EXP_TERMS,
    EXP_MAX_INPUT,
    EXP_MIN_INPUT,
    EXP_SATURATION,
    MAX_EXP_TERMS,
    MAX_POW_EXPONENT,
    MIN_EXP_TERMS,
    PRECISION,
)
from hydra.errors import InvalidInput
from hydra.safe_int import S

__all__ = [
    # Functions
    "sqrt",
    "exp",
    "pow_fixed",
    "mul_div",
    "to_fixed",
    "from_fixed",
    # Constants
    "PRECISION",
    "ONE_36",
]

ONE_36 = PRECISION * PRECISION


def sqrt(x: int) -> int:
    """Integer square root via Newton's method.

    The seed is 2^ceil(bits/2), which is never below the true root, so the
    iteration decreases monotonically and stops at floor(sqrt(x)).

    Applied to the product of two fixed-point values this yields their
    fixed-point geometric mean: sqrt(a * b) for a, b scaled by 10^18 is
    itself scaled by 10^18.

    Args:
        x: Non-negative integer

    Returns:
        floor(sqrt(x))

    Raises:
        InvalidInput: If x is negative
    """
    if x < 0:
        raise InvalidInput(f"sqrt of negative value: {x}")
    if x == 0:
        return 0

    z = 1 << ((x.bit_length() + 1) // 2)
    while True:
        y = (z + x // z) // 2
        if y >= z:
            return z
        z = y


def exp(x: int, terms: int = DEFAULT_EXP_TERMS) -> int:
    """Compute e^x where x is signed 18-decimal fixed-point.

    Positive inputs use the truncated series 1 + x + x^2/2! + ... with
    `terms` terms (constant included). Negative inputs are the inverse of
    e^-x scaled by 10^36, so the result for x < 0 is always below ONE.

    Args:
        x: Exponent in 18-decimal fixed-point (can be negative)
        terms: Number of Taylor terms, 3 to 6

    Returns:
        e^x as 18-decimal fixed-point; 0 below -41, EXP_SATURATION above 50

    Raises:
        InvalidInput: If terms is outside [3, 6]
    """
    if not MIN_EXP_TERMS <= terms <= MAX_EXP_TERMS:
        raise InvalidInput(f"exp terms must be in [{MIN_EXP_TERMS}, {MAX_EXP_TERMS}], got {terms}")

    if x < EXP_MIN_INPUT:
        return 0
    if x > EXP_MAX_INPUT:
        return EXP_SATURATION

    if x < 0:
        # e^-x >= ONE for -x >= 0, never zero
        return ONE_36 // exp(-x, terms)

    series_sum = PRECISION
    term = PRECISION
    for i in range(1, terms):
        term = (term * x) // (PRECISION * i)
        series_sum += term

    return series_sum


def pow_fixed(base: int, exponent: int) -> int:
    """Compute base^exponent by binary exponentiation in fixed-point.

    Each squaring and each accumulation is a checked 256-bit multiply
    followed by a rescale, so an overflow is reported at the step that
    caused it rather than after the fact.

    Args:
        base: Non-negative 18-decimal fixed-point base
        exponent: Plain integer exponent in [0, 32]

    Returns:
        base^exponent as 18-decimal fixed-point (ONE when exponent is 0)

    Raises:
        InvalidInput: If base is negative or exponent is outside [0, 32]
        MathOverflow: If an intermediate product exceeds 2^256-1
    """
    if base < 0:
        raise InvalidInput(f"pow base cannot be negative: {base}")
    if not 0 <= exponent <= MAX_POW_EXPONENT:
        raise InvalidInput(f"pow exponent must be in [0, {MAX_POW_EXPONENT}], got {exponent}")

    result = S(PRECISION)
    b = S(base)
    e = exponent
    while e:
        if e & 1:
            result = (result * b) // PRECISION
        e >>= 1
        if e:
            b = (b * b) // PRECISION

    return result.value


def mul_div(a: int, b: int, denominator: int) -> int:
    """Checked (a * b) // denominator.

    Raises:
        MathOverflow: If a * b exceeds 2^256-1
        DivisionByZero: If denominator is zero
    """
    return ((S(a) * S(b)) // S(denominator)).value


def to_fixed(d: Decimal | int | str) -> int:
    """Scale a decimal to 18-decimal fixed-point.

    Uses ROUND_HALF_UP for consistent rounding behavior.

    Raises:
        InvalidInput: If d is negative
    """
    with localcontext() as ctx:
        # Enough digits for any uint256
        ctx.prec = 78
        d = Decimal(d)
        if d < 0:
            raise InvalidInput(f"fixed-point values are unsigned, got {d}")
        return int((d * PRECISION).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_fixed(value: int) -> Decimal:
    """Convert an 18-decimal fixed-point value to Decimal for display."""
    return Decimal(value) / Decimal(PRECISION)
