"""Named curve presets.

Three hand-tuned configurations, from tight (stable) to wide (volatile):

    preset     steepness  width  power  weights (sig/gauss/rat)
    stable        18      0.15     3    0.6 / 0.3 / 0.1
    standard      15      0.20     4    0.5 / 0.3 / 0.2
    volatile      12      0.25     5    0.4 / 0.4 / 0.2
"""

from enum import Enum

from hydra.curve.config import CurveConfig

STABLE_CONFIG = CurveConfig(
    sigmoid_steepness=18,
    sigmoid_weight=6 * 10**17,
    gaussian_width=15 * 10**16,
    gaussian_weight=3 * 10**17,
    rational_power=3,
    rational_weight=1 * 10**17,
)

STANDARD_CONFIG = CurveConfig(
    sigmoid_steepness=15,
    sigmoid_weight=5 * 10**17,
    gaussian_width=2 * 10**17,
    gaussian_weight=3 * 10**17,
    rational_power=4,
    rational_weight=2 * 10**17,
)

VOLATILE_CONFIG = CurveConfig(
    sigmoid_steepness=12,
    sigmoid_weight=4 * 10**17,
    gaussian_width=25 * 10**16,
    gaussian_weight=4 * 10**17,
    rational_power=5,
    rational_weight=2 * 10**17,
)


class CurvePreset(str, Enum):
    """Named curve profile."""

    STABLE = "stable"
    STANDARD = "standard"
    VOLATILE = "volatile"

    @property
    def config(self) -> CurveConfig:
        """The constant configuration for this preset."""
        return _PRESET_CONFIGS[self]


_PRESET_CONFIGS: dict[CurvePreset, CurveConfig] = {
    CurvePreset.STABLE: STABLE_CONFIG,
    CurvePreset.STANDARD: STANDARD_CONFIG,
    CurvePreset.VOLATILE: VOLATILE_CONFIG,
}


def preset_config(name: str | CurvePreset) -> CurveConfig:
    """Resolve a preset by name (case-insensitive).

    Raises:
        ValueError: If name is not a known preset
    """
    if isinstance(name, CurvePreset):
        return name.config
    return CurvePreset(name.lower()).config
