"""Business logic services."""

from .dashboard_service import DashboardService
