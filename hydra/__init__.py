"""Hydra Curve - blended bonding-curve pricing engine."""

from hydra.curve import (
    CurveConfig,
    CurvePreset,
    LiquidityEngine,
    calculate_liquidity,
    calculate_price,
    quote_trade,
    select_config,
    validate_config,
)
from hydra.pools import PoolAccounting

__version__ = "0.1.0"
__all__ = [
    "CurveConfig",
    "CurvePreset",
    "LiquidityEngine",
    "PoolAccounting",
    "calculate_price",
    "calculate_liquidity",
    "quote_trade",
    "select_config",
    "validate_config",
    "__version__",
]
