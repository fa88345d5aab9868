#!/usr/bin/env python3
"""
Scoring Configuration - Weight vector and filter ranges.

Both are plain values: the UI layer owns and mutates them (see presets.py),
the ranking engine only ever receives them by value.
"""

from typing import Dict, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

WEIGHT_MIN = -10
WEIGHT_MAX = 10

WEIGHT_FACTORS: Tuple[str, ...] = ('demand', 'competition', 'average_price', 'trend', 'scalability')
FILTER_CATEGORIES: Tuple[str, ...] = ('price', 'demand', 'competition')

# Domain of each filter category; manual edits are clamped into these.
FILTER_LIMITS: Dict[str, Tuple[float, float]] = {
    'price': (0, 2000),
    'demand': (1, 10),
    'competition': (1, 10),
}


class ScoringWeights(BaseModel):
    """Signed per-factor weights (nominal range [-10, 10])."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    demand: int = Field(default=5, ge=WEIGHT_MIN, le=WEIGHT_MAX)
    competition: int = Field(default=-5, ge=WEIGHT_MIN, le=WEIGHT_MAX)
    average_price: int = Field(default=4, ge=WEIGHT_MIN, le=WEIGHT_MAX, alias='averagePrice')
    trend: int = Field(default=6, ge=WEIGHT_MIN, le=WEIGHT_MAX)
    scalability: int = Field(default=7, ge=WEIGHT_MIN, le=WEIGHT_MAX)


class FilterRange(BaseModel):
    """Inclusive [min, max] range. An inverted range cannot be constructed."""
    model_config = ConfigDict(frozen=True)

    min: float
    max: float

    @model_validator(mode='after')
    def _check_order(self) -> 'FilterRange':
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) cannot exceed max ({self.max})")
        return self

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


class FilterState(BaseModel):
    """Per-category inclusive ranges applied before scoring."""
    model_config = ConfigDict(frozen=True)

    price: FilterRange = FilterRange(min=0, max=2000)
    demand: FilterRange = FilterRange(min=1, max=10)
    competition: FilterRange = FilterRange(min=1, max=10)
