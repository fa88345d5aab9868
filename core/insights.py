#!/usr/bin/env python3
"""
Insights - Derived views over a ranked batch.

Rising-niche highlights, trend labels, pricing tiers, a simple ROI
projection and the percentage split of a score breakdown. All functions are
pure and read-only over ScoredNiche/Niche values.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence
import math

from core.niches.models import Niche
from core.niches.normalizer import round_half_up
from core.scorer.models import ScoreBreakdown, ScoredNiche

RISING_THRESHOLD = 0.6
FADING_THRESHOLD = -0.6


def rising_niches(
    scored: Sequence[ScoredNiche],
    threshold: float = RISING_THRESHOLD,
    limit: int = 3
) -> List[ScoredNiche]:
    """Niches with trend above threshold, strongest momentum first."""
    rising = [s for s in scored if s.niche.trend > threshold]
    rising.sort(key=lambda s: s.niche.trend, reverse=True)
    return rising[:limit]


def trend_label(trend: float) -> str:
    if trend > RISING_THRESHOLD:
        return "Rising"
    if trend < FADING_THRESHOLD:
        return "Fading"
    return "Stable"


@dataclass(frozen=True)
class PricingTiers:
    basic: int
    standard: float
    premium: int


def pricing_tiers(average_price: float) -> PricingTiers:
    """Basic at half price, standard at the market average, premium at 1.8x."""
    return PricingTiers(
        basic=round_half_up(average_price * 0.5),
        standard=average_price,
        premium=round_half_up(average_price * 1.8),
    )


@dataclass(frozen=True)
class RoiProjection:
    initial_investment: float
    projects_per_month: int
    revenue_per_month: float
    profit_per_month: float
    months_to_break_even: float


def project_roi(
    niche: Niche,
    initial_investment: float = 500.0,
    projects_per_month: int = 5,
    platform_fee: float = 0.2
) -> RoiProjection:
    """
    Project monthly revenue and break-even time for entering a niche.

    Formula:
    - revenue = projects_per_month * average_price
    - profit  = revenue * (1 - platform_fee)
    - months  = initial_investment / profit   (inf when profit <= 0)
    """
    revenue = projects_per_month * niche.average_price
    profit = revenue * (1.0 - platform_fee)
    months = initial_investment / profit if profit > 0 else math.inf
    return RoiProjection(
        initial_investment=initial_investment,
        projects_per_month=projects_per_month,
        revenue_per_month=revenue,
        profit_per_month=profit,
        months_to_break_even=months,
    )


def breakdown_shares(breakdown: ScoreBreakdown) -> Dict[str, int]:
    """Each factor's rounded percentage of the breakdown total (0 total counts as 1)."""
    total = breakdown.total or 1.0
    return {
        factor: round_half_up(value / total * 100)
        for factor, value in breakdown.to_dict().items()
    }
