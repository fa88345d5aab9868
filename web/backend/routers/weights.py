#!/usr/bin/env python3
"""
Weight endpoints - goal presets and individual weight sliders.
"""

from fastapi import APIRouter, Depends

from core.scorer.presets import WEIGHT_PRESETS
from core.scorer.weights import ScoringWeights
from ..dependencies import get_dashboard_service
from ..models.requests import WeightEdit
from ..models.responses import PresetsResponse, WeightsResponse
from ..services.dashboard_service import DashboardService
from ..utils import weights_response

router = APIRouter(prefix="/api/v1/weights", tags=["weights"])


@router.get("", response_model=WeightsResponse)
def get_weights(service: DashboardService = Depends(get_dashboard_service)):
    """Get the active goal and weight vector."""
    return weights_response(service.weights.goal.value, service.weights.weights)


@router.put("", response_model=WeightsResponse)
def put_weights(weights: ScoringWeights, service: DashboardService = Depends(get_dashboard_service)):
    """
    Replace the whole weight vector.

    The goal becomes the matching preset if the vector equals one, else custom.
    Each weight must lie in [-10, 10].
    """
    service.replace_weights(weights)
    return weights_response(service.weights.goal.value, service.weights.weights)


@router.patch("/{factor}", response_model=WeightsResponse)
def patch_weight(factor: str, edit: WeightEdit, service: DashboardService = Depends(get_dashboard_service)):
    """
    Move one weight slider.

    The value is clamped to [-10, 10] and the goal switches to custom.
    """
    service.set_weight(factor, edit.value)
    return weights_response(service.weights.goal.value, service.weights.weights)


@router.post("/preset/{goal}", response_model=WeightsResponse)
def apply_goal(goal: str, service: DashboardService = Depends(get_dashboard_service)):
    """
    Apply a goal preset.

    Presets: balanced, quick-start, high-ticket, trend-hunter, ai-hybrid
    """
    service.select_goal(goal)
    return weights_response(service.weights.goal.value, service.weights.weights)


@router.get("/presets", response_model=PresetsResponse)
def get_weight_presets():
    """List the goal preset catalog."""
    return PresetsResponse(presets={
        goal.value: weights.model_dump(by_alias=True)
        for goal, weights in WEIGHT_PRESETS.items()
    })
