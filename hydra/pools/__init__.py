"""Pool ledger package.

Provides PoolAccounting, the per-pair reserve ledger built on the engine.
"""

from .accounting import PoolAccounting
from .state import PairKey, PoolState, SwapQuote, pair_key

__all__ = ["PoolAccounting", "PairKey", "PoolState", "SwapQuote", "pair_key"]
