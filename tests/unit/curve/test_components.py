"""Tests for the sigmoid, gaussian and rational components."""

import pytest

from hydra.constants import PRECISION, UINT256_MAX
from hydra.curve.components import gaussian, rational, sigmoid
from hydra.errors import InvalidInput, MathOverflow
from hydra.math.fixed_point import ONE_36, exp

# Normalized inputs from tiny deviations up to the price envelope
XS = [
    0,
    1,
    10**9,
    10**16,
    PRECISION // 2,
    PRECISION,
    2 * PRECISION,
    10 * PRECISION,
    1000 * PRECISION,
    10**6 * PRECISION,
    10**30,
    10**36,
    10**40,
]
STEEPNESSES = [10, 12, 15, 18, 25]
WIDTHS = [10**16, 15 * 10**16, 2 * 10**17, 25 * 10**16, 3 * 10**17]
POWERS = [1, 3, 4, 5, 32]


class TestZeroInput:
    """Parity (x == 0) maps to exactly ONE."""

    @pytest.mark.parametrize("steepness", [0, *STEEPNESSES])
    def test_sigmoid_zero(self, steepness: int):
        assert sigmoid(0, steepness) == PRECISION

    @pytest.mark.parametrize("width", [0, *WIDTHS])
    def test_gaussian_zero(self, width: int):
        assert gaussian(0, width) == PRECISION

    @pytest.mark.parametrize("power", POWERS)
    def test_rational_zero(self, power: int):
        assert rational(0, power) == PRECISION


class TestDegenerateParameters:
    """Zero shape parameters have fixed outputs."""

    def test_sigmoid_zero_steepness_is_half(self):
        """A flat sigmoid sits at ONE/2."""
        for x in XS[1:]:
            assert sigmoid(x, 0) == PRECISION // 2

    def test_gaussian_zero_width_is_zero(self):
        for x in XS[1:]:
            assert gaussian(x, 0) == 0

    def test_rational_zero_power_is_one(self):
        for x in XS:
            assert rational(x, 0) == PRECISION


class TestBounds:
    """Every component stays within [0, ONE] for every valid parameter."""

    @pytest.mark.parametrize("steepness", STEEPNESSES)
    def test_sigmoid_bounded(self, steepness: int):
        for x in XS:
            assert 0 <= sigmoid(x, steepness) <= PRECISION

    @pytest.mark.parametrize("width", WIDTHS)
    def test_gaussian_bounded(self, width: int):
        for x in XS:
            assert 0 <= gaussian(x, width) <= PRECISION

    @pytest.mark.parametrize("power", POWERS)
    def test_rational_bounded(self, power: int):
        for x in XS:
            assert 0 <= rational(x, power) <= PRECISION

    @pytest.mark.parametrize("terms", [3, 4, 5, 6])
    def test_bounded_for_every_series_length(self, terms: int):
        for x in XS:
            assert 0 <= sigmoid(x, 15, terms=terms) <= PRECISION
            assert 0 <= gaussian(x, 2 * 10**17, terms=terms) <= PRECISION

    def test_sigmoid_never_below_half(self):
        """e^(-s*x) <= ONE, so the sigmoid stays in [ONE/2, ONE]."""
        for x in XS:
            assert sigmoid(x, 15) >= PRECISION // 2


class TestShape:
    """Monotonicity and known values."""

    def test_sigmoid_non_decreasing(self):
        values = [sigmoid(x, 15) for x in XS[1:]]
        assert values == sorted(values)

    def test_gaussian_non_increasing(self):
        values = [gaussian(x, 2 * 10**17) for x in XS]
        assert values == sorted(values, reverse=True)

    def test_rational_non_increasing(self):
        values = [rational(x, 4) for x in XS]
        assert values == sorted(values, reverse=True)

    def test_gaussian_at_one_width(self):
        """gaussian(w, w) = e^-1."""
        width = 2 * 10**17
        assert gaussian(width, width) == exp(-PRECISION)
        assert gaussian(width, width) == ONE_36 // exp(PRECISION)

    def test_gaussian_far_tail_is_zero(self):
        """Beyond the exp lower bound the bell is exactly 0."""
        assert gaussian(10 * PRECISION, 2 * 10**17) == 0

    def test_rational_at_one(self):
        """rational(1, p) = 1 / (1 + 1) for every power."""
        for power in POWERS:
            assert rational(PRECISION, power) == PRECISION // 2

    def test_sigmoid_large_input_saturates_to_one(self):
        """Once e^(-s*x) decays to 0 the sigmoid is exactly ONE."""
        assert sigmoid(10 * PRECISION, 15) == PRECISION

    def test_sigmoid_depends_on_series_length(self):
        """Fewer Taylor terms undershoot e^(s*x), so the sigmoid drops."""
        coarse = sigmoid(PRECISION, 10, terms=3)
        fine = sigmoid(PRECISION, 10, terms=6)
        assert coarse < fine


class TestDegradationAndGuards:
    """Overflow policy: rational degrades, the others raise."""

    def test_rational_overflow_returns_zero(self):
        """x^power past uint256 gives 0 instead of raising."""
        assert rational(10**30 * PRECISION, 4) == 0
        assert rational(10**6 * PRECISION, 32) == 0

    def test_sigmoid_product_overflow_raises(self):
        with pytest.raises(MathOverflow):
            sigmoid(UINT256_MAX, 25)

    @pytest.mark.parametrize("x", [10**30, 10**40, 2**130, UINT256_MAX])
    def test_gaussian_far_tail_never_overflows(self, x: int):
        """Inputs whose square would overflow are already in the zero tail."""
        for width in WIDTHS:
            assert gaussian(x, width) == 0

    def test_gaussian_cutoff_edge(self):
        """Just inside seven widths the exponent is already past exp's floor."""
        width = 2 * 10**17
        assert gaussian(7 * width, width) == 0
        assert gaussian(7 * width - 1, width) == 0
        assert gaussian(6 * width, width) > 0

    def test_gaussian_huge_width_overflow_raises(self):
        """Within the cutoff, x * ONE past 2^256-1 still raises."""
        with pytest.raises(MathOverflow):
            gaussian(2**200, 2**198)

    def test_negative_inputs_rejected(self):
        with pytest.raises(InvalidInput):
            sigmoid(-1, 15)
        with pytest.raises(InvalidInput):
            gaussian(-1, 2 * 10**17)
        with pytest.raises(InvalidInput):
            rational(-1, 4)

    def test_rational_power_above_bound_rejected(self):
        """Power 33 is refused, not degraded."""
        with pytest.raises(InvalidInput):
            rational(PRECISION, 33)
