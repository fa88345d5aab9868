#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

import threading
from typing import Optional

from core.llm.openai_service import OpenAINicheService
from database.database import build_engine, build_session_factory, init_db
from .config import get_config
from .services.dashboard_service import DashboardService

_dashboard_service: Optional[DashboardService] = None
_init_lock = threading.Lock()


def build_dashboard_service() -> DashboardService:
    """Wire the dashboard service from configuration."""
    config = get_config()
    engine = build_engine(config.storage.url)
    init_db(engine)
    return DashboardService(
        config=config,
        source=OpenAINicheService(config.llm),
        session_factory=build_session_factory(engine)
    )


def get_dashboard_service() -> DashboardService:
    """
    FastAPI dependency returning the process-wide dashboard service.

    Usage:
        @router.get("/endpoint")
        def my_endpoint(service: DashboardService = Depends(get_dashboard_service)):
            ...
    """
    global _dashboard_service
    if _dashboard_service is None:
        with _init_lock:
            if _dashboard_service is None:
                _dashboard_service = build_dashboard_service()
    return _dashboard_service
