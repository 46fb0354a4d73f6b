"""Per-pair reserve ledger and quoting adapter.

PoolAccounting owns the only mutable state in the system. It shapes inputs
for the LiquidityEngine and applies its results to the ledger, but performs
no curve math of its own.

Concurrency: each pair has its own lock, and every ledger mutation runs
under it. Pool states are immutable snapshots published by a single
assignment, so quotes read without locking and always see a consistent
pair of reserves.
"""

from __future__ import annotations

import threading
from dataclasses import replace

import structlog

from hydra.constants import BPS, PRECISION
from hydra.curve.config import CurveConfig, require_valid_config
from hydra.curve.engine import LiquidityEngine
from hydra.curve.presets import STANDARD_CONFIG
from hydra.curve.selector import select_config
from hydra.errors import (
    InsufficientLiquidity,
    InvalidInput,
    PoolInactive,
    PoolNotFound,
    SlippageExceeded,
)
from hydra.math.fixed_point import mul_div, sqrt
from hydra.models.metrics import MarketMetrics
from hydra.models.types import normalize_address
from hydra.pools.state import PairKey, PoolState, SwapQuote, pair_key
from hydra.safe_int import S
from hydra.settings import EngineSettings

logger = structlog.get_logger()


class PoolAccounting:
    """Reserve ledger for Hydra pools.

    Attributes:
        engine: Pricing engine used for every quote
        settings: Engine settings (fee, minimum liquidity)
    """

    def __init__(
        self,
        engine: LiquidityEngine | None = None,
        settings: EngineSettings | None = None,
    ) -> None:
        """Initialize an empty ledger.

        Args:
            engine: Pricing engine. Built from settings if not provided.
            settings: Used only when engine is not provided.
        """
        self.engine = engine or LiquidityEngine(settings)
        self.settings = self.engine.settings
        self._pools: dict[PairKey, PoolState] = {}
        self._locks: dict[PairKey, threading.Lock] = {}
        # Guards insertion into _pools/_locks
        self._registry_lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._pools)

    def __contains__(self, pair: object) -> bool:
        return pair in self._pools

    def pairs(self) -> list[PairKey]:
        """All registered pairs."""
        return list(self._pools)

    # --- Lifecycle ---

    def initialize_pool(
        self,
        token_a: str,
        token_b: str,
        amount_a: int,
        amount_b: int,
        config: CurveConfig = STANDARD_CONFIG,
    ) -> PoolState:
        """Create a pool and mint its initial shares.

        The initial share count is the engine's liquidity at parity, which
        is the geometric mean sqrt(amount_a * amount_b).

        Raises:
            InvalidInput: If the pair already exists or an amount is zero
            InvalidConfig: If config fails validation
            InsufficientLiquidity: If the geometric mean is below min_liquidity
        """
        pair = pair_key(token_a, token_b)
        if normalize_address(token_a) == pair[0]:
            reserve_x, reserve_y = amount_a, amount_b
        else:
            reserve_x, reserve_y = amount_b, amount_a

        shares = self.engine.calculate_liquidity(reserve_x, reserve_y, PRECISION, PRECISION, config)
        state = PoolState(
            token_x=pair[0],
            token_y=pair[1],
            reserve_x=reserve_x,
            reserve_y=reserve_y,
            total_shares=shares,
            active_config=config,
        )

        with self._registry_lock:
            if pair in self._pools:
                raise InvalidInput(f"Pool {pair} already initialized")
            self._locks[pair] = threading.Lock()
            self._pools[pair] = state

        logger.info(
            "pool_initialized",
            token_x=pair[0][-8:],
            token_y=pair[1][-8:],
            reserve_x=reserve_x,
            reserve_y=reserve_y,
            shares=shares,
        )
        return state

    def deactivate_pool(self, pair: PairKey) -> PoolState:
        """Take a pool out of service. Quotes and mutations fail afterwards."""
        with self._lock_for(pair):
            state = replace(self.get_pool(pair), active=False)
            self._pools[pair] = state
        logger.info("pool_deactivated", token_x=pair[0][-8:], token_y=pair[1][-8:])
        return state

    def get_pool(self, pair: PairKey) -> PoolState:
        """Current snapshot for a pair.

        Raises:
            PoolNotFound: If the pair is not registered
        """
        state = self._pools.get(pair)
        if state is None:
            raise PoolNotFound(f"No pool for pair {pair}")
        return state

    # --- Configuration ---

    def set_config(self, pair: PairKey, config: CurveConfig) -> PoolState:
        """Replace the pool's curve config wholesale.

        Raises:
            InvalidConfig: If config fails validation (the old one is kept)
        """
        require_valid_config(config)
        with self._lock_for(pair):
            state = replace(self._active_pool(pair), active_config=config)
            self._pools[pair] = state
        logger.info("pool_config_replaced", token_x=pair[0][-8:], token_y=pair[1][-8:])
        return state

    def apply_market_metrics(self, pair: PairKey, metrics: MarketMetrics) -> CurveConfig:
        """Re-select the pool's config from market telemetry."""
        config = select_config(metrics)
        self.set_config(pair, config)
        return config

    # --- Pricing ---

    def quote_swap(self, pair: PairKey, token_in: str, amount_in: int) -> SwapQuote:
        """Quote an exact-input swap against the current snapshot.

        Raises:
            PoolNotFound / PoolInactive: If the pool cannot trade
            InvalidInput: If amount_in is not positive or token_in is foreign
            InsufficientLiquidity: If the output would drain the pool
        """
        return self._quote(self._active_pool(pair), token_in, amount_in)

    def deposit_price(self, pair: PairKey) -> int:
        """Curve price of token_x in token_y units.

        Depositors use it to size the token_y leg of a deposit.
        """
        state = self._active_pool(pair)
        return self.engine.calculate_price(state.reserve_y, state.reserve_x, state.active_config)

    # --- Ledger mutations ---

    def swap(
        self,
        pair: PairKey,
        token_in: str,
        amount_in: int,
        min_amount_out: int = 0,
    ) -> SwapQuote:
        """Execute an exact-input swap.

        The quote is recomputed under the pair lock, so it is always
        applied to the reserves it was priced against. The fee stays in
        the pool.

        Raises:
            SlippageExceeded: If the net output is below min_amount_out
            (plus everything quote_swap raises)
        """
        with self._lock_for(pair):
            state = self._active_pool(pair)
            quote = self._quote(state, token_in, amount_in)
            if quote.amount_out < min_amount_out:
                raise SlippageExceeded(
                    f"Output {quote.amount_out} below minimum {min_amount_out}"
                )
            self._pools[pair] = state.with_swap(token_in, amount_in, quote.amount_out)

        logger.debug(
            "pool_swap",
            token_in=quote.token_in[-8:],
            token_out=quote.token_out[-8:],
            amount_in=amount_in,
            amount_out=quote.amount_out,
            fee=quote.fee_amount,
        )
        return quote

    def deposit(self, pair: PairKey, amount_x: int, amount_y: int) -> int:
        """Add liquidity and mint shares.

        Shares are minted against the scarcer side:
            min(amount_x * shares / reserve_x, amount_y * shares / reserve_y)
        Any excess of the other token stays in the pool.

        Returns:
            Number of shares minted

        Raises:
            InvalidInput: If an amount is zero or too small to mint a share
        """
        if amount_x <= 0 or amount_y <= 0:
            raise InvalidInput(f"Deposit amounts must be positive, got {amount_x}, {amount_y}")

        with self._lock_for(pair):
            state = self._active_pool(pair)
            shares = min(
                mul_div(amount_x, state.total_shares, state.reserve_x),
                mul_div(amount_y, state.total_shares, state.reserve_y),
            )
            if shares == 0:
                raise InvalidInput("Deposit too small to mint a share")
            self._pools[pair] = replace(
                state,
                reserve_x=(S(state.reserve_x) + amount_x).value,
                reserve_y=(S(state.reserve_y) + amount_y).value,
                total_shares=(S(state.total_shares) + shares).value,
            )

        logger.debug("pool_deposit", amount_x=amount_x, amount_y=amount_y, shares=shares)
        return shares

    def withdraw(self, pair: PairKey, shares: int) -> tuple[int, int]:
        """Burn shares for a proportional slice of both reserves.

        Returns:
            (amount_x, amount_y) paid out

        Raises:
            InvalidInput: If shares is not in (0, total_shares]
            InsufficientLiquidity: If the pool would fall below min_liquidity
        """
        with self._lock_for(pair):
            state = self._active_pool(pair)
            if not 0 < shares <= state.total_shares:
                raise InvalidInput(f"Cannot burn {shares} of {state.total_shares} shares")

            amount_x = mul_div(state.reserve_x, shares, state.total_shares)
            amount_y = mul_div(state.reserve_y, shares, state.total_shares)
            reserve_x = state.reserve_x - amount_x
            reserve_y = state.reserve_y - amount_y
            remaining = sqrt((S(reserve_x) * reserve_y).value)
            if remaining < self.settings.min_liquidity:
                raise InsufficientLiquidity(
                    f"Withdrawal leaves liquidity {remaining} below {self.settings.min_liquidity}"
                )
            self._pools[pair] = replace(
                state,
                reserve_x=reserve_x,
                reserve_y=reserve_y,
                total_shares=state.total_shares - shares,
            )

        logger.debug("pool_withdraw", shares=shares, amount_x=amount_x, amount_y=amount_y)
        return amount_x, amount_y

    # --- Internals ---

    def _lock_for(self, pair: PairKey) -> threading.Lock:
        lock = self._locks.get(pair)
        if lock is None:
            raise PoolNotFound(f"No pool for pair {pair}")
        return lock

    def _active_pool(self, pair: PairKey) -> PoolState:
        state = self.get_pool(pair)
        if not state.active:
            raise PoolInactive(f"Pool {pair} is inactive")
        return state

    def _quote(self, state: PoolState, token_in: str, amount_in: int) -> SwapQuote:
        if amount_in <= 0:
            raise InvalidInput(f"amount_in must be positive, got {amount_in}")
        reserve_in, reserve_out = state.reserves_for(token_in)

        price = self.engine.calculate_price(reserve_out, reserve_in, state.active_config)
        gross = mul_div(amount_in, price, PRECISION)
        fee = mul_div(gross, self.settings.swap_fee_bps, BPS)
        amount_out = gross - fee

        if amount_out + self.settings.min_liquidity > reserve_out:
            raise InsufficientLiquidity(
                f"Output {amount_out} would drain reserve {reserve_out}"
            )

        return SwapQuote(
            pair=state.pair,
            token_in=normalize_address(token_in),
            token_out=state.token_out_for(token_in),
            amount_in=amount_in,
            price=price,
            gross_amount_out=gross,
            fee_amount=fee,
            amount_out=amount_out,
            reserve_in=reserve_in,
            reserve_out=reserve_out,
        )
