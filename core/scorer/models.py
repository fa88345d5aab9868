#!/usr/bin/env python3
"""
Scoring Models - Data structures for ranking results.
"""

from typing import Dict
from dataclasses import dataclass, asdict

from core.niches.models import Niche


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-factor magnitude of influence, for display. Every value is >= 0."""
    demand: float = 0.0
    competition: float = 0.0
    price: float = 0.0
    trend: float = 0.0
    scalability: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @property
    def total(self) -> float:
        return self.demand + self.competition + self.price + self.trend + self.scalability


@dataclass(frozen=True)
class ScoredNiche:
    """A niche with its batch-relative score (0-100) and factor breakdown.

    Created fresh on every recomputation and never mutated; the next
    computed batch supersedes it wholesale.
    """
    niche: Niche
    score: int
    raw_score: float
    breakdown: ScoreBreakdown

    @property
    def name(self) -> str:
        return self.niche.name
