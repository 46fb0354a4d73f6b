"""Checked integer wrapper for fixed-point arithmetic.

SafeInt makes uint256 arithmetic fail loudly instead of producing values
the on-chain engine could never hold:
- Addition or multiplication past 2^256-1 raises MathOverflow
- Subtraction below zero raises Underflow
- Division or modulo by zero raises DivisionByZero

Usage pattern:
    from hydra.safe_int import S

    def mul_div(a: int, b: int, c: int) -> int:
        # Wrap at entry, unwrap at exit
        return ((S(a) * S(b)) // S(c)).value
"""

from __future__ import annotations

from hydra.constants import UINT256_MAX
from hydra.errors import DivisionByZero, MathOverflow, Underflow


class SafeInt:
    """Unsigned 256-bit integer with checked arithmetic.

    Operands must be non-negative. Every operator validates its result
    against the uint256 range before returning, so an overflow is reported
    at the operation that caused it.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        """Create a SafeInt from an integer or another SafeInt.

        Raises:
            TypeError: If value is not an int or SafeInt
            Underflow: If value is negative
            MathOverflow: If value exceeds 2^256-1
        """
        if isinstance(value, SafeInt):
            self._value = value._value
            return
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")
        self._value = _check(value)

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        """Add two values.

        Raises:
            MathOverflow: If the sum exceeds 2^256-1
        """
        other_val = _extract_value(other)
        result = self._value + other_val
        if result > UINT256_MAX:
            raise MathOverflow(f"Overflow: {self._value} + {other_val}")
        return SafeInt(result)

    def __radd__(self, other: int) -> SafeInt:
        return self.__add__(other)

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __rsub__(self, other: int) -> SafeInt:
        result = other - self._value
        if result < 0:
            raise Underflow(f"Underflow: {other} - {self._value} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        """Multiply two values.

        Raises:
            MathOverflow: If the product exceeds 2^256-1
        """
        other_val = _extract_value(other)
        result = self._value * other_val
        if result > UINT256_MAX:
            raise MathOverflow(f"Overflow: {self._value} * {other_val}")
        return SafeInt(result)

    def __rmul__(self, other: int) -> SafeInt:
        return self.__mul__(other)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    def __rfloordiv__(self, other: int) -> SafeInt:
        if self._value == 0:
            raise DivisionByZero(f"Division by zero: {other} // 0")
        return SafeInt(other // self._value)

    def __mod__(self, other: SafeInt | int) -> SafeInt:
        """Modulo operation.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Modulo by zero: {self._value} % 0")
        return SafeInt(self._value % other_val)

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._value != 0

    def __index__(self) -> int:
        return self._value

    # --- Named operations ---

    def min(self, other: SafeInt | int) -> SafeInt:
        """Return minimum of self and other."""
        return SafeInt(min(self._value, _extract_value(other)))

    def abs_diff(self, other: SafeInt | int) -> SafeInt:
        """Return |self - other| without underflow."""
        other_val = _extract_value(other)
        if self._value >= other_val:
            return SafeInt(self._value - other_val)
        return SafeInt(other_val - self._value)

    def checked_mul(self, other: SafeInt | int) -> SafeInt | None:
        """Multiply, returning None on overflow instead of raising."""
        result = self._value * _extract_value(other)
        if result > UINT256_MAX:
            return None
        return SafeInt(result)

    @classmethod
    def zero(cls) -> SafeInt:
        """Create a SafeInt with value 0."""
        return cls(0)


def _check(value: int) -> int:
    """Validate uint256 bounds."""
    if value < 0:
        raise Underflow(f"Negative value cannot be uint256: {value}")
    if value > UINT256_MAX:
        raise MathOverflow(f"Value exceeds uint256 max: {value}")
    return value


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt
