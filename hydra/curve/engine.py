"""Hydra liquidity engine.

Blends the sigmoid, gaussian and rational components into price and
liquidity outputs. Every entry point validates its config and inputs first
and aborts the whole call on the first failure; nothing is clamped.

Normalization: the components are evaluated on the distance of a price
ratio from parity, |ratio - ONE|. At parity every component is exactly ONE,
so the combined factor is ONE and balanced reserves price at exactly the
raw ratio. Away from parity the blend only ever scales down.
"""

from __future__ import annotations

from typing import NamedTuple

import structlog

from hydra.constants import BPS, PRECISION
from hydra.curve.components import gaussian, rational, sigmoid
from hydra.curve.config import CurveConfig, require_valid_config
from hydra.errors import InsufficientLiquidity, InvalidInput, PriceOutOfBounds
from hydra.math.fixed_point import mul_div, sqrt
from hydra.safe_int import S
from hydra.settings import DEFAULT_SETTINGS, EngineSettings

logger = structlog.get_logger()


class TradeQuote(NamedTuple):
    """Result of integrating the curve over a supply change.

    Attributes:
        expected_amount: Cost of the trade, fixed-point
        price_impact_bps: Deviation of the average price from the initial
            price, in basis points
    """

    expected_amount: int
    price_impact_bps: int


class LiquidityEngine:
    """Blended-curve pricing.

    Stateless apart from its settings; safe to share between threads.

    Attributes:
        settings: Safety envelope and exp() precision
    """

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self.settings = settings or DEFAULT_SETTINGS

    def blend(self, x: int, config: CurveConfig) -> int:
        """Weighted sum of the three components at normalized input x.

        combined = (sig * w_sig + gauss * w_gauss + rat * w_rat) / ONE

        The config is assumed valid; public entry points check it first.
        """
        terms = self.settings.exp_terms
        weighted = (
            S(sigmoid(x, config.sigmoid_steepness, terms=terms)) * config.sigmoid_weight
            + S(gaussian(x, config.gaussian_width, terms=terms)) * config.gaussian_weight
            + S(rational(x, config.rational_power)) * config.rational_weight
        )
        return (weighted // PRECISION).value

    def calculate_price(self, x: int, y: int, config: CurveConfig) -> int:
        """Curve price of reserve pair (x, y).

        price = ratio * blend(|ratio - ONE|) / ONE, with ratio = x * ONE / y

        Args:
            x: Numerator reserve, fixed-point
            y: Denominator reserve, fixed-point
            config: Curve configuration (validated here)

        Returns:
            Price as 18-decimal fixed-point

        Raises:
            InvalidInput: If either reserve is zero
            InvalidConfig: If config fails validation
            MathOverflow: If x * ONE exceeds 2^256-1
        """
        if x <= 0 or y <= 0:
            logger.debug("price_rejected_zero_reserve", x=x, y=y)
            raise InvalidInput(f"Reserves must be positive, got x={x} y={y}")
        require_valid_config(config)

        price_ratio = mul_div(x, PRECISION, y)
        combined = self.blend(S(price_ratio).abs_diff(PRECISION).value, config)
        return mul_div(price_ratio, combined, PRECISION)

    def calculate_liquidity(
        self,
        x: int,
        y: int,
        current_price: int,
        target_price: int,
        config: CurveConfig,
    ) -> int:
        """Effective liquidity of reserves (x, y) at current vs target price.

        The geometric mean sqrt(x * y) is the ceiling; the blend evaluated on
        |current / target - ONE| can only throttle it downward.

        Args:
            x: First reserve, fixed-point
            y: Second reserve, fixed-point
            current_price: Observed price, fixed-point
            target_price: Reference price, fixed-point
            config: Curve configuration (validated here)

        Returns:
            min(base, base * combined / ONE)

        Raises:
            InvalidInput: If any argument is zero
            PriceOutOfBounds: If either price exceeds max_price_ratio
            InvalidConfig: If config fails validation
            InsufficientLiquidity: If sqrt(x * y) is below min_liquidity
            MathOverflow: If x * y or a ratio product exceeds 2^256-1
        """
        if x <= 0 or y <= 0 or current_price <= 0 or target_price <= 0:
            logger.debug(
                "liquidity_rejected_zero_input",
                x=x,
                y=y,
                current_price=current_price,
                target_price=target_price,
            )
            raise InvalidInput(
                f"Inputs must be positive, got x={x} y={y} "
                f"current_price={current_price} target_price={target_price}"
            )
        max_price = self.settings.max_price_ratio
        if current_price > max_price or target_price > max_price:
            logger.debug(
                "liquidity_rejected_price_bounds",
                current_price=current_price,
                target_price=target_price,
                max_price_ratio=max_price,
            )
            raise PriceOutOfBounds(
                f"Price exceeds {max_price}: current={current_price} target={target_price}"
            )
        require_valid_config(config)

        base_liquidity = sqrt((S(x) * S(y)).value)
        if base_liquidity < self.settings.min_liquidity:
            raise InsufficientLiquidity(
                f"Liquidity {base_liquidity} below minimum {self.settings.min_liquidity}"
            )

        price_ratio = mul_div(current_price, PRECISION, target_price)
        price_delta = S(price_ratio).abs_diff(PRECISION).value
        combined = self.blend(price_delta, config)
        return min(base_liquidity, mul_div(base_liquidity, combined, PRECISION))

    def spot_price(self, supply: int, config: CurveConfig) -> int:
        """Curve price at a supply level, measured against one whole token."""
        return self.calculate_price(supply, PRECISION, config)

    def quote_trade(self, supply: int, delta_s: int, config: CurveConfig) -> TradeQuote:
        """Estimate the cost and price impact of moving supply by delta_s.

        Integrates the spot price over [supply, supply + delta_s] with the
        trapezoid rule: the average of the two endpoint prices times the
        size. Impact is the relative move of that average from the initial
        price.

        Args:
            supply: Current supply, fixed-point
            delta_s: Trade size, fixed-point
            config: Curve configuration

        Returns:
            TradeQuote; (0, 0) for a zero-size trade

        Raises:
            InvalidInput: If supply or delta_s is negative, or the initial
                price is zero (impact would be undefined)
            InvalidConfig: If config fails validation
            MathOverflow: If supply + delta_s or a product overflows
        """
        if supply < 0 or delta_s < 0:
            raise InvalidInput(f"supply and delta_s must be non-negative, got {supply}, {delta_s}")
        if delta_s == 0:
            return TradeQuote(expected_amount=0, price_impact_bps=0)

        initial_price = self.spot_price(supply, config)
        if initial_price == 0:
            raise InvalidInput(f"Initial price is zero at supply {supply}")
        final_price = self.spot_price((S(supply) + delta_s).value, config)

        average_price = ((S(initial_price) + final_price) // 2).value
        expected_amount = mul_div(delta_s, average_price, PRECISION)
        impact = mul_div(S(average_price).abs_diff(initial_price).value, BPS, initial_price)

        return TradeQuote(expected_amount=expected_amount, price_impact_bps=impact)


# Shared engine for the module-level helpers
DEFAULT_ENGINE = LiquidityEngine()


def calculate_price(x: int, y: int, config: CurveConfig) -> int:
    """calculate_price on the default engine."""
    return DEFAULT_ENGINE.calculate_price(x, y, config)


def calculate_liquidity(
    x: int, y: int, current_price: int, target_price: int, config: CurveConfig
) -> int:
    """calculate_liquidity on the default engine."""
    return DEFAULT_ENGINE.calculate_liquidity(x, y, current_price, target_price, config)


def quote_trade(supply: int, delta_s: int, config: CurveConfig) -> TradeQuote:
    """quote_trade on the default engine."""
    return DEFAULT_ENGINE.quote_trade(supply, delta_s, config)
