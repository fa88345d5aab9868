#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, Field
from typing import Any, List, Literal, Optional


class ScanRequest(BaseModel):
    """Request to run a fresh niche scan."""
    count: Optional[int] = Field(None, ge=1, le=25, description="Number of niches to request")


class NicheBatchRequest(BaseModel):
    """Caller-supplied raw niche records. Shape is not validated; the normalizer absorbs it."""
    niches: List[Any] = Field(default_factory=list)


class WeightEdit(BaseModel):
    """Manual edit of a single weight slider."""
    value: float = Field(allow_inf_nan=False, description="New weight; clamped to [-10, 10]")


class BoundEdit(BaseModel):
    """Manual edit of one filter bound."""
    bound: Literal['min', 'max']
    value: float = Field(allow_inf_nan=False, description="New bound; clamped into the category's domain")
