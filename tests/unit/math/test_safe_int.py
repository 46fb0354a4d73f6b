"""Tests for SafeInt checked arithmetic."""

import pytest

from hydra.constants import UINT256_MAX
from hydra.errors import DivisionByZero, HydraError, MathOverflow, Underflow
from hydra.safe_int import S, SafeInt


class TestSafeIntConstruction:
    """Tests for SafeInt construction."""

    def test_from_int(self):
        """SafeInt can be constructed from int."""
        assert SafeInt(42).value == 42

    def test_from_safeint(self):
        """SafeInt can be constructed from another SafeInt."""
        assert SafeInt(SafeInt(42)).value == 42

    def test_alias_s(self):
        """S is an alias for SafeInt."""
        assert S is SafeInt

    def test_zero_constructor(self):
        assert SafeInt.zero().value == 0

    def test_max_uint256_accepted(self):
        assert SafeInt(UINT256_MAX).value == UINT256_MAX

    def test_out_of_range_rejected(self):
        """Values outside uint256 are rejected at construction."""
        with pytest.raises(Underflow):
            SafeInt(-1)
        with pytest.raises(MathOverflow):
            SafeInt(UINT256_MAX + 1)

    def test_from_invalid_type_raises(self):
        """SafeInt rejects non-integers, including bool."""
        with pytest.raises(TypeError):
            SafeInt("42")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            SafeInt(3.14)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            SafeInt(True)


class TestSafeIntArithmetic:
    """Tests for SafeInt arithmetic operations."""

    def test_add(self):
        assert (S(10) + S(5)).value == 15
        assert (S(10) + 5).value == 15
        assert (5 + S(10)).value == 15

    def test_add_overflow(self):
        """Addition past 2^256-1 raises MathOverflow."""
        with pytest.raises(MathOverflow):
            S(UINT256_MAX) + 1

    def test_sub(self):
        assert (S(10) - S(3)).value == 7
        assert (10 - S(3)).value == 7

    def test_sub_underflow_raises(self):
        """Subtraction underflow raises Underflow."""
        with pytest.raises(Underflow) as exc_info:
            S(5) - S(10)
        assert "5 - 10" in str(exc_info.value)
        with pytest.raises(Underflow):
            5 - S(10)

    def test_mul(self):
        assert (S(6) * S(7)).value == 42
        assert (6 * S(7)).value == 42

    def test_mul_overflow(self):
        """Multiplication past 2^256-1 raises MathOverflow."""
        with pytest.raises(MathOverflow):
            S(2**128) * S(2**128)

    def test_mul_at_limit(self):
        """(2^128-1)^2 still fits."""
        assert (S(2**128 - 1) * S(2**128 - 1)).value == (2**128 - 1) ** 2

    def test_floordiv(self):
        assert (S(10) // S(3)).value == 3
        assert (10 // S(3)).value == 3

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZero):
            S(10) // 0
        with pytest.raises(DivisionByZero):
            10 // S(0)
        with pytest.raises(DivisionByZero):
            S(10) % 0

    def test_errors_share_taxonomy(self):
        """All guard errors are MathOverflow, HydraError and ArithmeticError."""
        for cls in (DivisionByZero, Underflow):
            assert issubclass(cls, MathOverflow)
        assert issubclass(MathOverflow, HydraError)
        assert issubclass(MathOverflow, ArithmeticError)


class TestSafeIntHelpers:
    """Named operations and comparisons."""

    def test_abs_diff(self):
        assert S(10).abs_diff(3).value == 7
        assert S(3).abs_diff(10).value == 7
        assert S(3).abs_diff(3).value == 0

    def test_min(self):
        assert S(10).min(3).value == 3

    def test_checked_mul(self):
        assert S(3).checked_mul(4) == 12
        assert S(2**200).checked_mul(2**100) is None

    def test_comparisons(self):
        assert S(3) < 4
        assert S(3) <= S(3)
        assert S(5) > S(4)
        assert S(5) >= 5
        assert S(5) == 5
        assert S(5) != S(6)

    def test_bool_and_int(self):
        assert not S(0)
        assert S(1)
        assert int(S(9)) == 9
