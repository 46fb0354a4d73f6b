"""Curve configuration and its validator."""

from dataclasses import dataclass

import structlog

from hydra.constants import (
    MAX_GAUSSIAN_WIDTH,
    MAX_RATIONAL_POWER,
    MAX_SIGMOID_STEEPNESS,
    MIN_GAUSSIAN_WIDTH,
    MIN_RATIONAL_POWER,
    MIN_SIGMOID_STEEPNESS,
    PRECISION,
)
from hydra.errors import InvalidConfig

logger = structlog.get_logger()


@dataclass(frozen=True)
class CurveConfig:
    """Parameters of a blended Hydra curve.

    Configs are immutable. A pool changes curve by swapping in a whole new
    config, never by editing one field.

    Attributes:
        sigmoid_steepness: Sigmoid slope, plain integer in [10, 25]
        sigmoid_weight: Sigmoid blend weight, fixed-point
        gaussian_width: Gaussian spread, fixed-point in [0.01, 0.3]
        gaussian_weight: Gaussian blend weight, fixed-point
        rational_power: Rational tail exponent, plain integer in [1, 32]
        rational_weight: Rational blend weight, fixed-point

    The three weights must sum to exactly PRECISION.
    """

    sigmoid_steepness: int
    sigmoid_weight: int
    gaussian_width: int
    gaussian_weight: int
    rational_power: int
    rational_weight: int

    @property
    def total_weight(self) -> int:
        return self.sigmoid_weight + self.gaussian_weight + self.rational_weight


def config_violations(config: CurveConfig) -> list[str]:
    """List every bound the config breaks (empty when valid)."""
    violations = []
    if not MIN_SIGMOID_STEEPNESS <= config.sigmoid_steepness <= MAX_SIGMOID_STEEPNESS:
        violations.append(
            f"sigmoid_steepness {config.sigmoid_steepness} outside "
            f"[{MIN_SIGMOID_STEEPNESS}, {MAX_SIGMOID_STEEPNESS}]"
        )
    if not MIN_GAUSSIAN_WIDTH <= config.gaussian_width <= MAX_GAUSSIAN_WIDTH:
        violations.append(
            f"gaussian_width {config.gaussian_width} outside "
            f"[{MIN_GAUSSIAN_WIDTH}, {MAX_GAUSSIAN_WIDTH}]"
        )
    if not MIN_RATIONAL_POWER <= config.rational_power <= MAX_RATIONAL_POWER:
        violations.append(
            f"rational_power {config.rational_power} outside "
            f"[{MIN_RATIONAL_POWER}, {MAX_RATIONAL_POWER}]"
        )
    weights = (config.sigmoid_weight, config.gaussian_weight, config.rational_weight)
    if any(w < 0 for w in weights):
        violations.append(f"negative weight in {weights}")
    if config.total_weight != PRECISION:
        violations.append(f"weights sum to {config.total_weight}, expected {PRECISION}")
    return violations


def validate_config(config: CurveConfig) -> bool:
    """True iff every parameter is in bounds and the weights sum to ONE exactly."""
    return not config_violations(config)


def require_valid_config(config: CurveConfig) -> CurveConfig:
    """Return config unchanged, or raise InvalidConfig naming the broken bounds."""
    violations = config_violations(config)
    if violations:
        logger.debug("curve_config_rejected", violations=violations)
        raise InvalidConfig("; ".join(violations))
    return config
