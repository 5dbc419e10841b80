"""Application DTOs (no storage dependency)."""

from app.application.dtos.catalog import ServicePage
from app.application.dtos.dashboard import DashboardStats, PopularService
from app.application.dtos.portal import GuestPortal, GuestRequestForm

__all__ = [
    "DashboardStats",
    "GuestPortal",
    "GuestRequestForm",
    "PopularService",
    "ServicePage",
]
