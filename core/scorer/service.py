#!/usr/bin/env python3
"""
Ranking Service - Filter, score, normalize and sort a batch of niches.

``rank_niches`` is a pure function of (candidates, filters, weights): it has no
I/O, keeps no state and never raises for normalized input. ``RankingService``
wraps it with a single-entry cache so a dashboard can call it on every
request and only pay for a recomputation when one of the inputs changed.
"""

from typing import List, Optional, Sequence, Tuple
import logging

from core.niches.models import Niche
from core.scorer.factors import TREND_SCALE, build_breakdown, calculate_factor_scores, price_anchor
from core.scorer.filters import apply_filters
from core.scorer.models import ScoredNiche
from core.scorer.normalization import min_max_to_percent
from core.scorer.weights import FilterState, ScoringWeights

logger = logging.getLogger(__name__)


def rank_niches(
    candidates: Sequence[Niche],
    filters: FilterState,
    weights: ScoringWeights,
    trend_scale: float = TREND_SCALE
) -> List[ScoredNiche]:
    """Rank niches by weighted, batch-normalized score.

    Steps:
    1. Drop niches outside the inclusive filter ranges
    2. Anchor price scoring on the batch's max price (floor 1)
    3. Weighted raw score per niche, plus display breakdown
    4. Min-max normalize raw scores to 0-100 (50 for all when degenerate)
    5. Sort by normalized score, highest first; ties keep filter order

    Args:
        candidates: Normalized niches
        filters: Inclusive ranges for price/demand/competition
        weights: Signed factor weights
        trend_scale: Multiplier applied to trend before weighting

    Returns:
        List of ScoredNiche, empty when nothing passes the filters
    """
    filtered = apply_filters(candidates, filters)
    if not filtered:
        return []

    max_price = price_anchor(filtered)

    scored: List[Tuple[Niche, float, dict]] = []
    for niche in filtered:
        raw_score, factor_scores = calculate_factor_scores(niche, max_price, weights, trend_scale)
        scored.append((niche, raw_score, factor_scores))

    normalized = min_max_to_percent([raw for _, raw, _ in scored])

    results = [
        ScoredNiche(
            niche=niche,
            score=score,
            raw_score=raw_score,
            breakdown=build_breakdown(factor_scores)
        )
        for (niche, raw_score, factor_scores), score in zip(scored, normalized)
    ]
    results.sort(key=lambda x: x.score, reverse=True)
    return results


class RankingService:
    """
    Memoizing front for ``rank_niches``.

    Only the most recent (candidates, filters, weights, trend_scale) tuple is
    kept; any change to an input triggers a full recomputation.
    """

    def __init__(self, trend_scale: float = TREND_SCALE):
        self.trend_scale = trend_scale
        self._cache_key: Optional[tuple] = None
        self._cache_value: List[ScoredNiche] = []

    def rank(
        self,
        candidates: Sequence[Niche],
        filters: FilterState,
        weights: ScoringWeights
    ) -> List[ScoredNiche]:
        key = (tuple(candidates), filters, weights, self.trend_scale)
        if key == self._cache_key:
            return list(self._cache_value)

        results = rank_niches(candidates, filters, weights, self.trend_scale)
        logger.info(f"Ranked {len(results)}/{len(candidates)} niches")

        self._cache_key = key
        self._cache_value = results
        return list(results)

    def invalidate(self) -> None:
        self._cache_key = None
        self._cache_value = []
