"""Tests for rising niches, trend labels, pricing tiers and ROI projection."""

import math

import pytest

import core.insights
from core.insights import (
    breakdown_shares,
    pricing_tiers,
    project_roi,
    rising_niches,
    trend_label,
)
from core.niches.normalizer import round_half_up
from core.scorer.models import ScoreBreakdown
from tests.fixtures.niches import make_niche, make_scored


class TestRisingNiches:

    def test_filters_sorts_and_limits(self):
        scored = [
            make_scored("Flat", trend=0.2),
            make_scored("Warm", trend=0.65),
            make_scored("Hot", trend=0.95),
            make_scored("Hotter", trend=1.2),
            make_scored("Boiling", trend=0.8),
        ]
        assert [s.name for s in rising_niches(scored)] == ["Hotter", "Hot", "Boiling"]

    def test_threshold_is_exclusive(self):
        assert rising_niches([make_scored("Edge", trend=0.6)]) == []

    def test_empty(self):
        assert rising_niches([]) == []


@pytest.mark.parametrize("trend,label", [
    (0.61, "Rising"), (0.6, "Stable"), (0.0, "Stable"), (-0.6, "Stable"), (-0.9, "Fading"),
])
def test_trend_label(trend, label):
    assert trend_label(trend) == label


class TestPricingTiers:

    def test_tiers_from_average(self):
        tiers = pricing_tiers(150)
        assert tiers.basic == 75
        assert tiers.standard == 150
        assert tiers.premium == 270

    def test_half_values_round_up(self):
        tiers = pricing_tiers(45)
        # 22.5 -> 23, 81.0 -> 81
        assert tiers.basic == 23
        assert tiers.premium == 81

    def test_rounding_matches_score_clamping(self):
        assert core.insights.round_half_up is round_half_up
        assert pricing_tiers(45).basic == round_half_up(22.5) == 23


class TestProjectRoi:

    def test_break_even_months(self):
        roi = project_roi(make_niche(average_price=250))

        assert roi.revenue_per_month == 1250
        assert roi.profit_per_month == pytest.approx(1000)
        assert roi.months_to_break_even == pytest.approx(0.5)

    def test_custom_inputs(self):
        roi = project_roi(make_niche(average_price=100), initial_investment=1200, projects_per_month=3)
        assert roi.months_to_break_even == pytest.approx(5.0)

    def test_free_niche_never_breaks_even(self):
        roi = project_roi(make_niche(average_price=0))
        assert math.isinf(roi.months_to_break_even)


class TestBreakdownShares:

    def test_shares_of_total(self):
        shares = breakdown_shares(ScoreBreakdown(demand=50, competition=25, price=25, trend=0, scalability=0))
        assert shares == {'demand': 50, 'competition': 25, 'price': 25, 'trend': 0, 'scalability': 0}

    def test_zero_total(self):
        assert set(breakdown_shares(ScoreBreakdown()).values()) == {0}
