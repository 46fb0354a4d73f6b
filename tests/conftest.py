"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
import structlog

from hydra.constants import PRECISION
from hydra.curve.config import CurveConfig
from hydra.curve.engine import LiquidityEngine
from hydra.curve.presets import STABLE_CONFIG, STANDARD_CONFIG, VOLATILE_CONFIG
from hydra.pools import PairKey, PoolAccounting
from tests.helpers import TOKEN_A, TOKEN_B


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo any structlog.configure() a test (e.g. the CLI) performed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def engine() -> LiquidityEngine:
    """Engine with default settings."""
    return LiquidityEngine()


@pytest.fixture(params=["stable", "standard", "volatile"])
def preset(request: pytest.FixtureRequest) -> CurveConfig:
    """Each named preset in turn."""
    return {
        "stable": STABLE_CONFIG,
        "standard": STANDARD_CONFIG,
        "volatile": VOLATILE_CONFIG,
    }[request.param]


@pytest.fixture
def ledger() -> PoolAccounting:
    """Empty ledger with default settings (30 bps fee)."""
    return PoolAccounting()


@pytest.fixture
def balanced_pair(ledger: PoolAccounting) -> PairKey:
    """A 1000/1000 pool on the standard curve."""
    state = ledger.initialize_pool(TOKEN_A, TOKEN_B, 1000 * PRECISION, 1000 * PRECISION)
    return state.pair


@pytest.fixture
def skewed_pair(ledger: PoolAccounting) -> PairKey:
    """A 1000 A / 4000 B pool on the standard curve (2000 shares)."""
    state = ledger.initialize_pool(TOKEN_A, TOKEN_B, 1000 * PRECISION, 4000 * PRECISION)
    return state.pair
