#!/usr/bin/env python3
"""
Niche Normalizer - Defensive parsing boundary for LLM-generated candidates.

The data source is an unreliable generator, so every field is coerced to a
bounded value or replaced by a deterministic default. ``normalize_niche`` is
total: it never raises, whatever it is handed.
"""

from typing import Any, Callable, List, Mapping, Optional, Tuple
import logging
import math

from core.niches.models import Faq, Niche

logger = logging.getLogger(__name__)

DEFAULT_SCORE = 5
DEFAULT_PRICE = 50.0
DEFAULT_TREND = 0.5
SCORE_MIN = 1
SCORE_MAX = 10
DEFAULT_NAME = "Untitled Niche"

MAX_GIG_TITLES = 3
MAX_KEYWORDS = 5
MAX_FAQS = 3
MAX_MARKETING_CHANNELS = 3
MAX_PAIN_POINTS = 3

DEFAULT_FAQS: Tuple[Faq, ...] = (Faq(question="Requirement?", answer="Project brief."),)
DEFAULT_MARKETING_CHANNELS: Tuple[str, ...] = ("LinkedIn", "Twitter", "Cold Outreach")
DEFAULT_PAIN_POINTS: Tuple[str, ...] = (
    "High cost of alternatives",
    "Slow delivery",
    "Lack of niche expertise",
)

FALLBACK_TEXT = {
    'battle_plan': "Leverage first-mover advantage.",
    'competitor_weakness': "Generic or non-specialized providers.",
    'competition_note': "Low-quality generic listings.",
    'target_audience': "Tech-savvy entrepreneurs.",
    'strategic_forecast': "Demand expected to hold steady through the next cycle.",
}


def _to_finite_float(value: Any) -> Optional[float]:
    """Return value as a finite float, or None when it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_score(value: Any, default: int = DEFAULT_SCORE) -> int:
    """Round to the nearest integer and clamp into [1, 10]."""
    number = _to_finite_float(value)
    if number is None:
        return default
    return max(SCORE_MIN, min(SCORE_MAX, round_half_up(number)))


def _price(value: Any) -> float:
    number = _to_finite_float(value)
    if number is None:
        return DEFAULT_PRICE
    return max(0.0, number)


def _trend(value: Any) -> float:
    number = _to_finite_float(value)
    return DEFAULT_TREND if number is None else number


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _string_list(value: Any, cap: int) -> Tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    items = [item for item in value if isinstance(item, str) and item.strip()]
    return tuple(items[:cap])


def _faq_list(value: Any) -> Tuple[Faq, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    faqs = []
    for item in value:
        if not isinstance(item, Mapping):
            continue
        question = _text(item.get('question'))
        answer = _text(item.get('answer'))
        if question and answer:
            faqs.append(Faq(question=question, answer=answer))
    return tuple(faqs[:MAX_FAQS])


def _or_default(items: Tuple, default: Callable[[], Tuple]) -> Tuple:
    return items if items else default()


def normalize_niche(raw: Any) -> Niche:
    """
    Coerce an arbitrary object into a valid Niche.

    - demand, competition, scalabilityIndex, aiRisk: rounded half-up and
      clamped to [1, 10]; 5 when missing or non-numeric
    - averagePrice: finite numbers pass through (negatives clamp to 0);
      otherwise 50
    - trend: finite numbers pass through; otherwise 0.5
    - list fields are truncated to their caps, or replaced by defaults
    - text fields fall back to fixed sentences

    Args:
        raw: Anything; usually one element of the LLM's JSON array

    Returns:
        Normalized Niche
    """
    data: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}

    name = _text(data.get('niche')) or _text(data.get('name')) or DEFAULT_NAME
    description = _text(data.get('description')) or ""

    return Niche(
        name=name,
        description=description,
        average_price=_price(data.get('averagePrice')),
        demand=clamp_score(data.get('demand')),
        competition=clamp_score(data.get('competition')),
        trend=_trend(data.get('trend')),
        scalability_index=clamp_score(data.get('scalabilityIndex')),
        ai_risk=clamp_score(data.get('aiRisk')),
        gig_titles=_or_default(
            _string_list(data.get('gigTitles'), MAX_GIG_TITLES),
            lambda: (f"Expert {name} Services",)
        ),
        gig_description=_text(data.get('gigDescription')) or description,
        keywords=_or_default(
            _string_list(data.get('keywords'), MAX_KEYWORDS),
            lambda: tuple(name.lower().split()[:MAX_KEYWORDS])
        ),
        faqs=_or_default(_faq_list(data.get('faqs')), lambda: DEFAULT_FAQS),
        battle_plan=_text(data.get('battlePlan')) or FALLBACK_TEXT['battle_plan'],
        competitor_weakness=_text(data.get('competitorWeakness')) or FALLBACK_TEXT['competitor_weakness'],
        competition_note=_text(data.get('competitionNote')) or FALLBACK_TEXT['competition_note'],
        target_audience=_text(data.get('targetAudience')) or FALLBACK_TEXT['target_audience'],
        strategic_forecast=_text(data.get('strategicForecast')) or FALLBACK_TEXT['strategic_forecast'],
        marketing_channels=_or_default(
            _string_list(data.get('marketingChannels'), MAX_MARKETING_CHANNELS),
            lambda: DEFAULT_MARKETING_CHANNELS
        ),
        pain_points=_or_default(
            _string_list(data.get('painPoints'), MAX_PAIN_POINTS),
            lambda: DEFAULT_PAIN_POINTS
        ),
    )


def normalize_niches(raws: Any) -> List[Niche]:
    """Normalize a whole batch; anything that is not a list yields an empty batch."""
    if not isinstance(raws, (list, tuple)):
        logger.warning(f"Expected a list of niches, got {type(raws).__name__}; using empty batch")
        return []
    return [normalize_niche(raw) for raw in raws]
