"""Application use cases: one entry point per workflow."""

from app.application.use_cases.dashboard import GetDashboardStatsUseCase, compute_dashboard_stats
from app.application.use_cases.guest_portal import GuestPortalService

__all__ = [
    "GetDashboardStatsUseCase",
    "GuestPortalService",
    "compute_dashboard_stats",
]
