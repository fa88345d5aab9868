#!/usr/bin/env python3
"""
Presets - Named weight vectors and filter ranges, plus their selectors.

Both selectors are small state machines whose states are the preset ids plus
a ``custom`` sentinel:
- selecting a preset overwrites the active value wholesale
- any manual edit moves the selector to ``custom`` without touching the
  other fields
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union
import logging

from core.exceptions import UnknownFactorError, UnknownPresetError
from core.scorer.weights import (
    FILTER_CATEGORIES,
    FILTER_LIMITS,
    WEIGHT_FACTORS,
    WEIGHT_MAX,
    WEIGHT_MIN,
    FilterRange,
    FilterState,
    ScoringWeights,
)

logger = logging.getLogger(__name__)


class NicheGoal(str, Enum):
    """Strategic goal behind a weight preset."""
    BALANCED = 'balanced'
    QUICK_START = 'quick-start'
    HIGH_TICKET = 'high-ticket'
    TREND_HUNTER = 'trend-hunter'
    AI_HYBRID = 'ai-hybrid'
    CUSTOM = 'custom'


class FilterPresetId(str, Enum):
    ALL = 'all'
    HIGH_GROWTH = 'high-growth'
    LOW_ENTRY = 'low-entry'
    PREMIUM = 'premium'
    CUSTOM = 'custom'


WEIGHT_PRESETS: Dict[NicheGoal, ScoringWeights] = {
    NicheGoal.BALANCED: ScoringWeights(demand=5, competition=-5, average_price=4, trend=6, scalability=7),
    NicheGoal.QUICK_START: ScoringWeights(demand=8, competition=-10, average_price=3, trend=5, scalability=5),
    NicheGoal.HIGH_TICKET: ScoringWeights(demand=4, competition=-4, average_price=10, trend=3, scalability=8),
    NicheGoal.TREND_HUNTER: ScoringWeights(demand=3, competition=-3, average_price=4, trend=10, scalability=6),
    NicheGoal.AI_HYBRID: ScoringWeights(demand=6, competition=-4, average_price=5, trend=7, scalability=10),
}

FILTER_PRESETS: Dict[FilterPresetId, FilterState] = {
    FilterPresetId.ALL: FilterState(),
    FilterPresetId.HIGH_GROWTH: FilterState(
        demand=FilterRange(min=6, max=10),
        competition=FilterRange(min=1, max=6),
    ),
    FilterPresetId.LOW_ENTRY: FilterState(competition=FilterRange(min=1, max=4)),
    FilterPresetId.PREMIUM: FilterState(price=FilterRange(min=150, max=2000)),
}

DEFAULT_GOAL = NicheGoal.BALANCED
DEFAULT_FILTER_PRESET = FilterPresetId.ALL


def parse_goal(goal: Union[str, NicheGoal]) -> NicheGoal:
    try:
        return NicheGoal(goal)
    except ValueError:
        valid = ', '.join(g.value for g in NicheGoal)
        raise UnknownPresetError(f"Invalid preset '{goal}'. Valid options: {valid}") from None


def parse_filter_preset(preset: Union[str, FilterPresetId]) -> FilterPresetId:
    try:
        return FilterPresetId(preset)
    except ValueError:
        valid = ', '.join(p.value for p in FilterPresetId)
        raise UnknownPresetError(f"Invalid filter preset '{preset}'. Valid options: {valid}") from None


def clamp_weight(value: float) -> int:
    return int(max(WEIGHT_MIN, min(WEIGHT_MAX, round(value))))


class WeightSelector:
    """Active goal + weight vector. Starts on the default preset."""

    def __init__(
        self,
        goal: Union[str, NicheGoal] = DEFAULT_GOAL,
        weights: Optional[ScoringWeights] = None
    ):
        self.goal = parse_goal(goal)
        if weights is not None:
            self.weights = weights
        elif self.goal is NicheGoal.CUSTOM:
            self.weights = WEIGHT_PRESETS[DEFAULT_GOAL]
        else:
            self.weights = WEIGHT_PRESETS[self.goal]

    def select(self, goal: Union[str, NicheGoal]) -> ScoringWeights:
        """Switch goal. Presets overwrite every weight; ``custom`` keeps them."""
        goal = parse_goal(goal)
        self.goal = goal
        if goal is not NicheGoal.CUSTOM:
            self.weights = WEIGHT_PRESETS[goal]
        logger.debug(f"Weight goal set to {goal.value}")
        return self.weights

    def set_weight(self, factor: str, value: float) -> ScoringWeights:
        """Manually edit one factor (clamped to [-10, 10]); the goal becomes custom."""
        if factor == 'averagePrice':
            factor = 'average_price'
        if factor not in WEIGHT_FACTORS:
            raise UnknownFactorError(
                f"Unknown weight factor '{factor}'. Valid options: {', '.join(WEIGHT_FACTORS)}"
            )
        self.weights = self.weights.model_copy(update={factor: clamp_weight(value)})
        self.goal = NicheGoal.CUSTOM
        return self.weights

    def replace(self, weights: ScoringWeights) -> ScoringWeights:
        """Install a whole weight vector supplied from outside (e.g. storage)."""
        self.weights = weights
        self.goal = NicheGoal.CUSTOM
        for goal, preset in WEIGHT_PRESETS.items():
            if preset == weights:
                self.goal = goal
                break
        return self.weights


@dataclass(frozen=True)
class FilterEdit:
    """Outcome of a manual bound edit."""
    filters: FilterState
    category: str
    bound: str
    requested: float
    applied: float
    boundary_lock: bool = False


class FilterController:
    """Active filter preset + ranges, with clamp-on-conflict bound edits."""

    def __init__(self, preset: Union[str, FilterPresetId] = DEFAULT_FILTER_PRESET):
        self.preset = parse_filter_preset(preset)
        if self.preset is FilterPresetId.CUSTOM:
            self.filters = FILTER_PRESETS[DEFAULT_FILTER_PRESET]
        else:
            self.filters = FILTER_PRESETS[self.preset]

    def select(self, preset: Union[str, FilterPresetId]) -> FilterState:
        preset = parse_filter_preset(preset)
        self.preset = preset
        if preset is not FilterPresetId.CUSTOM:
            self.filters = FILTER_PRESETS[preset]
        return self.filters

    def reset(self) -> FilterState:
        return self.select(DEFAULT_FILTER_PRESET)

    def set_bound(self, category: str, bound: str, value: float) -> FilterEdit:
        """
        Manually edit one bound of a range.

        The value is first clamped into the category's domain. If it would
        invert the range, the edited bound is locked to the other bound
        instead, and the returned edit reports ``boundary_lock=True``.
        """
        if category not in FILTER_CATEGORIES:
            raise UnknownFactorError(
                f"Unknown filter category '{category}'. Valid options: {', '.join(FILTER_CATEGORIES)}"
            )
        if bound not in ('min', 'max'):
            raise UnknownFactorError(f"Unknown bound '{bound}'. Valid options: min, max")

        self.preset = FilterPresetId.CUSTOM
        lo, hi = FILTER_LIMITS[category]
        current: FilterRange = getattr(self.filters, category)
        applied = max(lo, min(hi, value))
        boundary_lock = False

        if bound == 'min' and applied > current.max:
            applied = current.max
            boundary_lock = True
        elif bound == 'max' and applied < current.min:
            applied = current.min
            boundary_lock = True

        if boundary_lock:
            logger.info(f"Boundary lock on {category}.{bound}: requested {value}, kept {applied}")

        new_range = FilterRange(**{**current.model_dump(), bound: applied})
        self.filters = self.filters.model_copy(update={category: new_range})

        return FilterEdit(
            filters=self.filters,
            category=category,
            bound=bound,
            requested=value,
            applied=applied,
            boundary_lock=boundary_lock
        )
