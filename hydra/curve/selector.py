"""Adaptive curve selection from market telemetry.

Scores a token on a 0-100 scale and maps the score onto a preset:

    composite = 0.7 * volatility + 0.3 * age_factor
    volatility = 0.6 * volume_ratio + 0.4 * holder_concentration

    composite < 30  -> stable
    composite < 70  -> standard
    otherwise       -> volatile

All arithmetic is integer; the function is total over valid metrics and
never raises.
"""

from dataclasses import dataclass

import structlog

from hydra.curve.config import CurveConfig
from hydra.curve.presets import CurvePreset
from hydra.models.metrics import MarketMetrics

logger = structlog.get_logger()

MAX_SCORE = 100

STABLE_THRESHOLD = 30
VOLATILE_THRESHOLD = 70

# (upper bound exclusive, score); fewer holders means more concentration
HOLDER_CONCENTRATION_STEPS: tuple[tuple[int, int], ...] = (
    (100, 100),
    (500, 80),
    (1_000, 60),
    (5_000, 40),
    (10_000, 20),
)
HOLDER_CONCENTRATION_FLOOR = 10

# (upper bound exclusive in days, factor); younger tokens are riskier
AGE_STEPS: tuple[tuple[int, int], ...] = (
    (1, 100),
    (7, 80),
    (30, 60),
    (90, 40),
    (365, 20),
)
AGE_FLOOR = 10


@dataclass(frozen=True)
class MarketScore:
    """Breakdown of the selector's decision.

    Attributes:
        volume_ratio: 24h volume as a percentage of market cap, capped at 100
        holder_concentration: Inverse step score of holder count
        volatility_score: 60/40 blend of volume ratio and concentration
        age_factor: Decreasing step score of token age
        composite: 70/30 blend of volatility and age
        preset: Preset the composite maps to
    """

    volume_ratio: int
    holder_concentration: int
    volatility_score: int
    age_factor: int
    composite: int
    preset: CurvePreset


def _step(value: int, steps: tuple[tuple[int, int], ...], floor: int) -> int:
    for bound, score in steps:
        if value < bound:
            return score
    return floor


def volume_to_mcap_ratio(metrics: MarketMetrics) -> int:
    """24h volume as a percentage of market cap, capped at 100.

    A zero market cap is treated as maximal turnover.
    """
    if metrics.market_cap == 0:
        return MAX_SCORE
    return min(MAX_SCORE, metrics.volume_24h * MAX_SCORE // metrics.market_cap)


def holder_concentration_score(holder_count: int) -> int:
    return _step(holder_count, HOLDER_CONCENTRATION_STEPS, HOLDER_CONCENTRATION_FLOOR)


def age_factor(age_days: int) -> int:
    return _step(age_days, AGE_STEPS, AGE_FLOOR)


def score_market(metrics: MarketMetrics) -> MarketScore:
    """Compute the full selector breakdown for a metrics snapshot."""
    volume_ratio = volume_to_mcap_ratio(metrics)
    concentration = holder_concentration_score(metrics.holder_count)
    volatility = (60 * volume_ratio + 40 * concentration) // 100
    age = age_factor(metrics.age_days)
    composite = (70 * volatility + 30 * age) // 100

    if composite < STABLE_THRESHOLD:
        preset = CurvePreset.STABLE
    elif composite < VOLATILE_THRESHOLD:
        preset = CurvePreset.STANDARD
    else:
        preset = CurvePreset.VOLATILE

    return MarketScore(
        volume_ratio=volume_ratio,
        holder_concentration=concentration,
        volatility_score=volatility,
        age_factor=age,
        composite=composite,
        preset=preset,
    )


def select_preset(metrics: MarketMetrics) -> CurvePreset:
    """Pick the preset for a metrics snapshot."""
    score = score_market(metrics)
    logger.debug(
        "curve_preset_selected",
        preset=score.preset.value,
        composite=score.composite,
        volatility=score.volatility_score,
        age_factor=score.age_factor,
    )
    return score.preset


def select_config(metrics: MarketMetrics) -> CurveConfig:
    """Pick the curve configuration for a metrics snapshot."""
    return select_preset(metrics).config
