"""Numeric constants for the Hydra curve engine.

All fixed-point values are integers scaled by PRECISION (10^18).
"""

PRECISION = 10**18

UINT256_MAX = 2**256 - 1
UINT128_MAX = 2**128 - 1

# exp() domain; beyond these it decays to 0 or saturates at EXP_SATURATION
EXP_MIN_INPUT = -41 * PRECISION
EXP_MAX_INPUT = 50 * PRECISION
EXP_SATURATION = UINT128_MAX

# Taylor series length for exp(), constant term included
MIN_EXP_TERMS = 3
MAX_EXP_TERMS = 6
DEFAULT_EXP_TERMS = 6

# pow() exponents above this are rejected, never evaluated
MAX_POW_EXPONENT = 32

# Curve parameter bounds
MIN_SIGMOID_STEEPNESS = 10
MAX_SIGMOID_STEEPNESS = 25
MIN_GAUSSIAN_WIDTH = 10**16  # 0.01
MAX_GAUSSIAN_WIDTH = 3 * 10**17  # 0.3
MIN_RATIONAL_POWER = 1
MAX_RATIONAL_POWER = MAX_POW_EXPONENT

# Global safety envelope
MAX_PRICE_RATIO = 10**6 * PRECISION
MIN_LIQUIDITY = 1000

# Swap fee in basis points (30 = 0.3%)
BPS = 10_000
DEFAULT_SWAP_FEE_BPS = 30
