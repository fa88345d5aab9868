#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional


class RankedNiche(BaseModel):
    """One row of the leaderboard."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "rank": 1,
                "name": "AI Voice Agent Setup",
                "score": 100,
                "raw_score": 112.5,
                "trend_label": "Rising",
                "breakdown": {"demand": 40, "competition": 15, "price": 40, "trend": 4.8, "scalability": 63},
                "breakdown_shares": {"demand": 25, "competition": 9, "price": 25, "trend": 3, "scalability": 39},
                "niche": {"niche": "AI Voice Agent Setup", "averagePrice": 450}
            }
        }
    )

    rank: int
    name: str
    score: int = Field(ge=0, le=100)
    raw_score: float
    trend_label: str
    breakdown: Dict[str, float]
    breakdown_shares: Dict[str, int]
    niche: Dict[str, Any]


class RankingResponse(BaseModel):
    niches: List[RankedNiche]
    total_candidates: int
    no_matches: bool
    goal: str
    filter_preset: str
    last_error: Optional[str] = None


class WeightsResponse(BaseModel):
    goal: str
    weights: Dict[str, int]


class PresetsResponse(BaseModel):
    presets: Dict[str, Dict[str, Any]]


class FiltersResponse(BaseModel):
    preset: str
    filters: Dict[str, Dict[str, float]]
    boundary_lock: bool = False
    notice: Optional[str] = None


class RoiResponse(BaseModel):
    name: str
    initial_investment: float
    projects_per_month: int
    revenue_per_month: float
    profit_per_month: float
    months_to_break_even: Optional[float] = Field(None, description="null when the niche never breaks even")
    pricing_tiers: Dict[str, float]
