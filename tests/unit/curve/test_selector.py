"""Tests for adaptive curve selection."""

import pytest

from hydra.constants import UINT256_MAX
from hydra.curve.presets import STABLE_CONFIG, STANDARD_CONFIG, VOLATILE_CONFIG, CurvePreset
from hydra.curve.selector import (
    age_factor,
    holder_concentration_score,
    score_market,
    select_config,
    select_preset,
    volume_to_mcap_ratio,
)
from tests.helpers import DAY, make_metrics


class TestVolumeRatio:
    """24h volume as a percentage of market cap."""

    def test_zero_market_cap_is_maximal(self):
        """No division by zero: an unpriced token counts as full turnover."""
        assert volume_to_mcap_ratio(make_metrics(market_cap=0)) == 100
        assert volume_to_mcap_ratio(make_metrics(market_cap=0, volume_24h=0)) == 100

    def test_zero_market_cap_score(self):
        assert score_market(make_metrics(market_cap=0)).volume_ratio == 100

    def test_percentage(self):
        assert volume_to_mcap_ratio(make_metrics(market_cap=100, volume_24h=5)) == 5
        assert volume_to_mcap_ratio(make_metrics(market_cap=1000, volume_24h=999)) == 99

    def test_capped_at_100(self):
        assert volume_to_mcap_ratio(make_metrics(market_cap=100, volume_24h=500)) == 100
        assert volume_to_mcap_ratio(make_metrics(market_cap=1, volume_24h=UINT256_MAX)) == 100


class TestStepFunctions:
    """Holder concentration and age steps."""

    @pytest.mark.parametrize(
        "holders,score",
        [
            (0, 100),
            (99, 100),
            (100, 80),
            (499, 80),
            (500, 60),
            (999, 60),
            (1_000, 40),
            (4_999, 40),
            (5_000, 20),
            (9_999, 20),
            (10_000, 10),
            (10**12, 10),
        ],
    )
    def test_holder_concentration(self, holders: int, score: int):
        assert holder_concentration_score(holders) == score

    @pytest.mark.parametrize(
        "days,factor",
        [
            (0, 100),
            (1, 80),
            (6, 80),
            (7, 60),
            (29, 60),
            (30, 40),
            (89, 40),
            (90, 20),
            (364, 20),
            (365, 10),
            (10_000, 10),
        ],
    )
    def test_age_factor(self, days: int, factor: int):
        assert age_factor(days) == factor

    def test_age_uses_whole_days(self):
        """A token one second short of a day is still day 0."""
        assert make_metrics(age_seconds=DAY - 1).age_days == 0
        assert score_market(make_metrics(age_seconds=DAY - 1)).age_factor == 100
        assert score_market(make_metrics(age_seconds=DAY)).age_factor == 80


class TestComposite:
    """Composite score and preset thresholds."""

    def test_fresh_token_is_volatile(self):
        metrics = make_metrics(market_cap=0, volume_24h=0, holder_count=10, age_seconds=0)
        score = score_market(metrics)
        assert score.volume_ratio == 100
        assert score.holder_concentration == 100
        assert score.volatility_score == 100
        assert score.age_factor == 100
        assert score.composite == 100
        assert score.preset is CurvePreset.VOLATILE
        assert select_config(metrics) is VOLATILE_CONFIG

    def test_established_token_is_stable(self):
        metrics = make_metrics(
            market_cap=10**9, volume_24h=10**6, holder_count=50_000, age_seconds=400 * DAY
        )
        score = score_market(metrics)
        assert score.volume_ratio == 0
        assert score.volatility_score == 4
        assert score.composite == 5
        assert select_config(metrics) is STABLE_CONFIG

    def test_mid_token_is_standard(self):
        metrics = make_metrics(
            market_cap=1000, volume_24h=300, holder_count=2000, age_seconds=10 * DAY
        )
        score = score_market(metrics)
        assert score.volume_ratio == 30
        assert score.holder_concentration == 40
        assert score.volatility_score == 34
        assert score.age_factor == 60
        assert score.composite == 41
        assert select_config(metrics) is STANDARD_CONFIG

    def test_stable_threshold_edge(self):
        """Composite 29 is stable, 30 is standard."""
        old_wide = {"market_cap": 100, "holder_count": 10_000, "age_seconds": 365 * DAY}
        below = score_market(make_metrics(volume_24h=58, **old_wide))
        at = score_market(make_metrics(volume_24h=59, **old_wide))
        assert below.composite == 29
        assert below.preset is CurvePreset.STABLE
        assert at.composite == 30
        assert at.preset is CurvePreset.STANDARD

    def test_volatile_threshold_edge(self):
        """Composite 69 is standard, 70 is volatile."""
        old_narrow = {"market_cap": 100, "holder_count": 50, "age_seconds": 365 * DAY}
        below = score_market(make_metrics(volume_24h=93, **old_narrow))
        at = score_market(make_metrics(volume_24h=94, **old_narrow))
        assert below.composite == 69
        assert below.preset is CurvePreset.STANDARD
        assert at.composite == 70
        assert at.preset is CurvePreset.VOLATILE

    def test_select_preset_matches_score(self):
        metrics = make_metrics()
        assert select_preset(metrics) is score_market(metrics).preset

    def test_deterministic(self):
        metrics = make_metrics(market_cap=0)
        assert score_market(metrics) == score_market(metrics)

    def test_total_over_extremes(self):
        """Every extreme input yields a preset without raising."""
        for cap in (0, 1, UINT256_MAX):
            for volume in (0, UINT256_MAX):
                for holders in (0, UINT256_MAX):
                    for age in (0, UINT256_MAX):
                        metrics = make_metrics(
                            market_cap=cap,
                            volume_24h=volume,
                            holder_count=holders,
                            age_seconds=age,
                        )
                        assert 0 <= score_market(metrics).composite <= 100
