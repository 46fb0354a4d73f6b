"""Hydra error classes.

Every pricing failure aborts the whole call with one of these. Nothing in the
engine catches them except where a lossy degradation is part of the contract
(``rational`` returning 0 when its power overflows).
"""


class HydraError(Exception):
    """Base error for Hydra curve operations."""

    pass


class InvalidInput(HydraError):
    """Zero or degenerate argument (zero reserve, zero price, bad exponent)."""

    pass


class InvalidConfig(HydraError):
    """Curve configuration failed validation."""

    pass


class PriceOutOfBounds(HydraError):
    """Price exceeds the sanctioned MAX_PRICE_RATIO envelope."""

    pass


class MathOverflow(HydraError, ArithmeticError):
    """An arithmetic guard tripped (result would leave the uint256 range)."""

    pass


class DivisionByZero(MathOverflow):
    """Division or modulo by zero."""

    pass


class Underflow(MathOverflow):
    """Subtraction would produce a negative result."""

    pass


class InsufficientLiquidity(HydraError):
    """Pool liquidity is below the minimum viable size."""

    pass


class PoolNotFound(InvalidInput):
    """No pool is registered for the requested pair."""

    pass


class PoolInactive(InvalidInput):
    """The pool has been taken out of service."""

    pass


class SlippageExceeded(HydraError):
    """Settled output fell below the caller's minimum."""

    pass
