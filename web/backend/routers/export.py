#!/usr/bin/env python3
"""
Export endpoints - download the current ranking as CSV or JSON.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from export.exporters import to_csv, to_flat_csv, to_json
from ..dependencies import get_dashboard_service
from ..exceptions import InvalidPresetException, NothingToExportException
from ..services.dashboard_service import DashboardService

router = APIRouter(prefix="/api/v1/export", tags=["export"])

EXPORT_FORMATS = {
    'csv': (to_csv, 'text/csv', 'niches.csv'),
    'flat-csv': (to_flat_csv, 'text/csv', 'niches_full.csv'),
    'json': (to_json, 'application/json', 'niches.json'),
}


@router.get("/{fmt}")
def export_ranking(fmt: str, service: DashboardService = Depends(get_dashboard_service)):
    """
    Export the current ranking.

    Formats: csv, flat-csv, json. Responds 400 for any other format and
    404 when the ranking is empty.
    """
    if fmt not in EXPORT_FORMATS:
        raise InvalidPresetException(f"Unknown export format '{fmt}'. Valid options: {', '.join(EXPORT_FORMATS)}")

    render, media_type, filename = EXPORT_FORMATS[fmt]
    content = render(service.ranked())
    if content is None:
        raise NothingToExportException("No data to export")

    return Response(
        content=content,
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )
