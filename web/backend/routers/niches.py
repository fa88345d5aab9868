#!/usr/bin/env python3
"""
Niche endpoints - ranked leaderboard, batch loading and per-niche views.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from core.insights import pricing_tiers, project_roi, rising_niches
from export.blueprint import blueprint_filename, to_blueprint_markdown
from ..dependencies import get_dashboard_service
from ..models.requests import NicheBatchRequest, ScanRequest
from ..models.responses import RankedNiche, RankingResponse, RoiResponse
from ..services.dashboard_service import DashboardService
from ..utils import finite_or_none, to_ranked_niches

router = APIRouter(prefix="/api/v1", tags=["niches"])


def _ranking_response(service: DashboardService) -> RankingResponse:
    ranked = service.ranked()
    return RankingResponse(
        niches=to_ranked_niches(ranked),
        total_candidates=service.candidate_count,
        no_matches=service.has_batch and not ranked,
        goal=service.weights.goal.value,
        filter_preset=service.filters.preset.value,
        last_error=service.last_error
    )


@router.post("/scan", response_model=RankingResponse)
def run_scan(request: Optional[ScanRequest] = None, service: DashboardService = Depends(get_dashboard_service)):
    """
    Ask the AI data source for a fresh batch of niches and rank it.

    On failure responds 502 with ``retryable: true``; the previous batch
    and its ranking are left untouched.
    """
    service.scan(request.count if request else None)
    return _ranking_response(service)


@router.post("/niches", response_model=RankingResponse)
def load_niches(request: NicheBatchRequest, service: DashboardService = Depends(get_dashboard_service)):
    """Replace the current batch with caller-supplied raw niche records."""
    service.load_batch(request.niches)
    return _ranking_response(service)


@router.get("/niches", response_model=RankingResponse)
def get_niches(service: DashboardService = Depends(get_dashboard_service)):
    """
    Get the ranked leaderboard for the current batch, weights and filters.

    ``no_matches`` is true when a batch is loaded but the filters exclude
    every niche.
    """
    return _ranking_response(service)


@router.get("/niches/rising", response_model=List[RankedNiche])
def get_rising_niches(service: DashboardService = Depends(get_dashboard_service)):
    """Up to three niches with trend above 0.6, strongest momentum first."""
    rising = rising_niches(service.ranked())
    return to_ranked_niches(rising)


@router.get("/niches/{name}/roi", response_model=RoiResponse)
def get_niche_roi(
    name: str,
    initial_investment: float = 500.0,
    projects_per_month: int = 5,
    service: DashboardService = Depends(get_dashboard_service)
):
    """Break-even projection and pricing tiers for one ranked niche."""
    niche = service.find(name).niche
    roi = project_roi(niche, initial_investment=initial_investment, projects_per_month=projects_per_month)
    tiers = pricing_tiers(niche.average_price)
    return RoiResponse(
        name=niche.name,
        initial_investment=roi.initial_investment,
        projects_per_month=roi.projects_per_month,
        revenue_per_month=roi.revenue_per_month,
        profit_per_month=roi.profit_per_month,
        months_to_break_even=finite_or_none(roi.months_to_break_even),
        pricing_tiers={'basic': tiers.basic, 'standard': tiers.standard, 'premium': tiers.premium}
    )


@router.get("/niches/{name}/blueprint", response_class=PlainTextResponse)
def get_niche_blueprint(name: str, service: DashboardService = Depends(get_dashboard_service)):
    """Markdown execution blueprint for one ranked niche, as a download."""
    scored = service.find(name)
    return PlainTextResponse(
        to_blueprint_markdown(scored),
        media_type="text/markdown",
        headers={"Content-Disposition": f'attachment; filename="{blueprint_filename(scored.name)}"'}
    )
