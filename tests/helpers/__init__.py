"""Test helpers module for shared test utilities.

- constants: Token addresses and common amounts
- factories: MarketMetrics and CurveConfig factory functions
"""

from tests.helpers.constants import DAY, TOKEN_A, TOKEN_B, TOKEN_C
from tests.helpers.factories import make_config, make_metrics

__all__ = [
    # Constants
    "TOKEN_A",
    "TOKEN_B",
    "TOKEN_C",
    "DAY",
    # Factories
    "make_config",
    "make_metrics",
]
