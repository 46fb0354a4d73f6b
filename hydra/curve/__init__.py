"""Hydra blended bonding curve.

This package provides the curve itself:
- components: sigmoid, gaussian and rational shape functions
- config: CurveConfig and its validator
- presets: stable / standard / volatile constants
- selector: adaptive preset selection from market metrics
- engine: LiquidityEngine (price, liquidity, trade quotes)
"""

# Components
from .components import gaussian, rational, sigmoid

# Config and validation
from .config import CurveConfig, config_violations, require_valid_config, validate_config

# Engine
from .engine import (
    DEFAULT_ENGINE,
    LiquidityEngine,
    TradeQuote,
    calculate_liquidity,
    calculate_price,
    quote_trade,
)

# Presets
from .presets import STABLE_CONFIG, STANDARD_CONFIG, VOLATILE_CONFIG, CurvePreset, preset_config

# Adaptive selection
from .selector import MarketScore, score_market, select_config, select_preset, volume_to_mcap_ratio

__all__ = [
    # Components
    "sigmoid",
    "gaussian",
    "rational",
    # Config
    "CurveConfig",
    "validate_config",
    "config_violations",
    "require_valid_config",
    # Presets
    "CurvePreset",
    "STABLE_CONFIG",
    "STANDARD_CONFIG",
    "VOLATILE_CONFIG",
    "preset_config",
    # Selector
    "MarketScore",
    "score_market",
    "select_config",
    "select_preset",
    "volume_to_mcap_ratio",
    # Engine
    "LiquidityEngine",
    "TradeQuote",
    "DEFAULT_ENGINE",
    "calculate_price",
    "calculate_liquidity",
    "quote_trade",
]
