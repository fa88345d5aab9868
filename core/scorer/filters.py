#!/usr/bin/env python3
"""
Range Filters - Inclusive price/demand/competition gates applied before scoring.
"""

from typing import List, Sequence
import logging

from core.niches.models import Niche
from core.scorer.weights import FilterState

logger = logging.getLogger(__name__)


def passes_filters(niche: Niche, filters: FilterState) -> bool:
    """True iff price, demand and competition all fall inside their inclusive ranges."""
    return (
        filters.price.contains(niche.average_price) and
        filters.demand.contains(niche.demand) and
        filters.competition.contains(niche.competition)
    )


def apply_filters(candidates: Sequence[Niche], filters: FilterState) -> List[Niche]:
    """
    Keep candidates inside every range, preserving input order.

    Returns:
        Filtered list (possibly empty)
    """
    filtered = [n for n in candidates if passes_filters(n, filters)]
    logger.debug(f"Filters kept {len(filtered)}/{len(candidates)} niches")
    return filtered
