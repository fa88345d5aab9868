#!/usr/bin/env python3
"""
Utility functions for turning domain values into API responses.
"""

import math
from typing import List, Optional

from core.insights import breakdown_shares, trend_label
from core.scorer.models import ScoredNiche
from core.scorer.weights import FilterState, ScoringWeights
from export.exporters import to_records
from .models.responses import FiltersResponse, RankedNiche, WeightsResponse


def to_ranked_niches(ranked: List[ScoredNiche]) -> List[RankedNiche]:
    records = to_records(ranked)
    return [
        RankedNiche(
            rank=i + 1,
            name=scored.name,
            score=scored.score,
            raw_score=scored.raw_score,
            trend_label=trend_label(scored.niche.trend),
            breakdown=scored.breakdown.to_dict(),
            breakdown_shares=breakdown_shares(scored.breakdown),
            niche=record
        )
        for i, (scored, record) in enumerate(zip(ranked, records))
    ]


def weights_response(goal: str, weights: ScoringWeights) -> WeightsResponse:
    return WeightsResponse(goal=goal, weights=weights.model_dump(by_alias=True))


def filters_response(
    preset: str,
    filters: FilterState,
    boundary_lock: bool = False,
    notice: Optional[str] = None
) -> FiltersResponse:
    return FiltersResponse(
        preset=preset,
        filters=filters.model_dump(),
        boundary_lock=boundary_lock,
        notice=notice
    )


def finite_or_none(value: float) -> Optional[float]:
    """JSON has no infinity; map it to null."""
    return value if math.isfinite(value) else None
