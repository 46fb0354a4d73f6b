"""Engine settings for the Hydra curve."""

import os
from dataclasses import dataclass

from hydra.constants import (
    BPS,
    DEFAULT_EXP_TERMS,
    DEFAULT_SWAP_FEE_BPS,
    MAX_EXP_TERMS,
    MAX_PRICE_RATIO,
    MIN_EXP_TERMS,
    MIN_LIQUIDITY,
)
from hydra.errors import InvalidInput


@dataclass(frozen=True)
class EngineSettings:
    """Centralized configuration for the pricing engine and pool ledger.

    Holds the safety envelope and cost knobs so tests and callers can run
    the engine with different bounds without touching module constants.

    Attributes:
        exp_terms: Taylor series length for exp() (3-6). Fewer terms are
            cheaper and less precise.
        max_price_ratio: Largest price accepted by calculate_liquidity
        min_liquidity: Smallest viable geometric-mean liquidity
        swap_fee_bps: Flat swap fee applied by PoolAccounting (30 = 0.3%)
    """

    exp_terms: int = DEFAULT_EXP_TERMS
    max_price_ratio: int = MAX_PRICE_RATIO
    min_liquidity: int = MIN_LIQUIDITY
    swap_fee_bps: int = DEFAULT_SWAP_FEE_BPS

    def __post_init__(self) -> None:
        if not MIN_EXP_TERMS <= self.exp_terms <= MAX_EXP_TERMS:
            raise InvalidInput(
                f"exp_terms must be in [{MIN_EXP_TERMS}, {MAX_EXP_TERMS}], got {self.exp_terms}"
            )
        if self.max_price_ratio <= 0:
            raise InvalidInput(f"max_price_ratio must be positive, got {self.max_price_ratio}")
        if self.min_liquidity < 0:
            raise InvalidInput(f"min_liquidity cannot be negative, got {self.min_liquidity}")
        if not 0 <= self.swap_fee_bps < BPS:
            raise InvalidInput(f"swap_fee_bps must be in [0, {BPS}), got {self.swap_fee_bps}")

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Build settings from environment variables.

        - HYDRA_EXP_TERMS: Taylor terms for exp (default: 6)
        - HYDRA_MAX_PRICE_RATIO: price envelope, fixed-point (default: 1e24)
        - HYDRA_MIN_LIQUIDITY: minimum pool liquidity (default: 1000)
        - HYDRA_SWAP_FEE_BPS: swap fee in bps (default: 30)
        """
        return cls(
            exp_terms=int(os.environ.get("HYDRA_EXP_TERMS", DEFAULT_EXP_TERMS)),
            max_price_ratio=int(os.environ.get("HYDRA_MAX_PRICE_RATIO", MAX_PRICE_RATIO)),
            min_liquidity=int(os.environ.get("HYDRA_MIN_LIQUIDITY", MIN_LIQUIDITY)),
            swap_fee_bps=int(os.environ.get("HYDRA_SWAP_FEE_BPS", DEFAULT_SWAP_FEE_BPS)),
        )


# Default settings instance
DEFAULT_SETTINGS = EngineSettings()
