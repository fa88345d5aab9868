#!/usr/bin/env python3
"""
Factor Scores - Weighted per-factor contributions to the raw score.

Each factor is brought to a comparable 0-10-ish range before weighting:
demand, competition and scalability are already 1-10, price is rescaled
against the most expensive niche of the current filtered batch, and trend is
multiplied by ``trend_scale``.
"""

from typing import Dict, Sequence, Tuple

from core.niches.models import Niche
from core.scorer.models import ScoreBreakdown
from core.scorer.weights import ScoringWeights

# Trend is used as the raw signed float (x1). Set scoring.trend_scale to 10 in
# config.yaml to put it on the same 0-10 footing as the other factors.
TREND_SCALE = 1.0

PRICE_SCALE = 10.0
PRICE_ANCHOR_FLOOR = 1.0


def price_anchor(candidates: Sequence[Niche]) -> float:
    """Largest average price in the batch, floored at 1 so it can divide safely."""
    return max([n.average_price for n in candidates] + [PRICE_ANCHOR_FLOOR])


def calculate_factor_scores(
    niche: Niche,
    max_price: float,
    weights: ScoringWeights,
    trend_scale: float = TREND_SCALE
) -> Tuple[float, Dict[str, float]]:
    """
    Calculate signed factor scores and the raw score.

    Formula:
    - demand      = demand * w.demand
    - competition = competition * w.competition   (weight usually negative)
    - price       = (price / max_price) * 10 * w.average_price
    - trend       = trend * trend_scale * w.trend
    - scalability = scalability_index * w.scalability
    - raw_score   = sum of the above

    Returns: (raw_score, factor_scores)
    """
    factor_scores = {
        'demand': niche.demand * weights.demand,
        'competition': niche.competition * weights.competition,
        'price': (niche.average_price / max_price) * PRICE_SCALE * weights.average_price,
        'trend': niche.trend * trend_scale * weights.trend,
        'scalability': niche.scalability_index * weights.scalability,
    }
    return float(sum(factor_scores.values())), factor_scores


def build_breakdown(factor_scores: Dict[str, float]) -> ScoreBreakdown:
    """Display magnitudes: negatives clip to 0, except competition which shows abs()."""
    return ScoreBreakdown(
        demand=max(0.0, factor_scores['demand']),
        competition=max(0.0, abs(factor_scores['competition'])),
        price=max(0.0, factor_scores['price']),
        trend=max(0.0, factor_scores['trend']),
        scalability=max(0.0, factor_scores['scalability']),
    )
