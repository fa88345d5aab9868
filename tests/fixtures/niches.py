"""Candidate builders shared by the scoring and export tests."""

from core.niches.models import Niche
from core.niches.normalizer import normalize_niche
from core.scorer.models import ScoreBreakdown, ScoredNiche


def make_niche(name: str = "Niche", **overrides) -> Niche:
    """Build a normalized Niche with neutral metrics unless overridden."""
    values = dict(
        name=name,
        average_price=100.0,
        demand=5,
        competition=5,
        trend=0.0,
        scalability_index=5,
        ai_risk=5,
    )
    values.update(overrides)
    return Niche(**values)


def make_scored(name: str = "Niche", score: int = 50, **overrides) -> ScoredNiche:
    """
    Build a ScoredNiche from a raw camelCase record, the way a scan delivers it.

    Overrides use the data source's keys (averagePrice, faqs as dicts) and go
    through normalize_niche, so numbers get the same coercion as live data.
    """
    raw = {
        'niche': name,
        'description': f"{name} for busy founders.",
        'averagePrice': 100,
        'demand': 5,
        'competition': 5,
        'trend': 0.0,
        'scalabilityIndex': 5,
        'aiRisk': 5,
        'gigTitles': [f"I will do {name}", f"Expert {name}"],
        'keywords': ["alpha", "beta"],
        'faqs': [
            {'question': "How long?", 'answer': "Three days."},
            {'question': "Revisions?", 'answer': "Two rounds."},
        ],
        'battlePlan': "Undercut on turnaround.",
        'targetAudience': "Startups",
        'marketingChannels': ["LinkedIn", "Reddit"],
        'painPoints': ["Slow agencies", "Vague pricing"],
    }
    raw.update(overrides)
    breakdown = ScoreBreakdown(demand=25.0, competition=25.0, price=40.0, trend=0.0, scalability=35.0)
    return ScoredNiche(niche=normalize_niche(raw), score=score, raw_score=float(score), breakdown=breakdown)
