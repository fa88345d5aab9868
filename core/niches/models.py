#!/usr/bin/env python3
"""
Niche Models - Normalized candidate records proposed by the data source.
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Faq:
    """Question/answer pair shown on a gig page."""
    question: str
    answer: str


@dataclass(frozen=True)
class Niche:
    """A proposed freelance-service niche with its market metrics.

    Instances are produced by ``normalize_niche`` and are guaranteed to hold
    bounded numeric fields: demand, competition, scalability_index and ai_risk
    are integers in [1, 10] and average_price is never negative.
    """
    name: str
    description: str = ""
    average_price: float = 50.0
    demand: int = 5
    competition: int = 5
    trend: float = 0.5

    scalability_index: int = 5
    ai_risk: int = 5

    gig_titles: Tuple[str, ...] = field(default_factory=tuple)
    gig_description: str = ""
    keywords: Tuple[str, ...] = field(default_factory=tuple)
    faqs: Tuple[Faq, ...] = field(default_factory=tuple)
    battle_plan: str = ""
    competitor_weakness: str = ""
    competition_note: str = ""
    target_audience: str = ""
    strategic_forecast: str = ""
    marketing_channels: Tuple[str, ...] = field(default_factory=tuple)
    pain_points: Tuple[str, ...] = field(default_factory=tuple)
