#!/usr/bin/env python3
"""
Filter endpoints - range presets and manual bound edits.
"""

from fastapi import APIRouter, Depends

from core.scorer.presets import FILTER_PRESETS
from ..dependencies import get_dashboard_service
from ..models.requests import BoundEdit
from ..models.responses import FiltersResponse, PresetsResponse
from ..services.dashboard_service import DashboardService
from ..utils import filters_response

router = APIRouter(prefix="/api/v1/filters", tags=["filters"])


@router.get("", response_model=FiltersResponse)
def get_filters(service: DashboardService = Depends(get_dashboard_service)):
    """Get the active filter preset and ranges."""
    return filters_response(service.filters.preset.value, service.filters.filters)


@router.patch("/{category}", response_model=FiltersResponse)
def patch_filter(category: str, edit: BoundEdit, service: DashboardService = Depends(get_dashboard_service)):
    """
    Edit one bound of a price/demand/competition range.

    A bound that would cross the other one is locked to it instead; the
    response then carries ``boundary_lock: true`` and a notice.
    """
    result = service.set_filter_bound(category, edit.bound, edit.value)
    notice = "Min cannot exceed Max" if result.boundary_lock else None
    return filters_response(
        service.filters.preset.value,
        result.filters,
        boundary_lock=result.boundary_lock,
        notice=notice
    )


@router.post("/preset/{preset}", response_model=FiltersResponse)
def apply_filter_preset(preset: str, service: DashboardService = Depends(get_dashboard_service)):
    """
    Apply a filter preset.

    Presets: all, high-growth, low-entry, premium
    """
    filters = service.select_filter_preset(preset)
    return filters_response(service.filters.preset.value, filters)


@router.post("/reset", response_model=FiltersResponse)
def reset_filters(service: DashboardService = Depends(get_dashboard_service)):
    """Back to the unrestricted 'all' preset."""
    filters = service.reset_filters()
    return filters_response(service.filters.preset.value, filters)


@router.get("/presets", response_model=PresetsResponse)
def get_filter_presets():
    """List the filter preset catalog."""
    return PresetsResponse(presets={
        preset.value: state.model_dump() for preset, state in FILTER_PRESETS.items()
    })
