"""DTOs for the admin dashboard."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PopularService:
    service_id: str
    service_name: str
    count: int


@dataclass
class DashboardStats:
    """Request counts for the admin dashboard (all tenants or one tenant)."""

    total_requests: int = 0
    pending_requests: int = 0
    completed_requests: int = 0
    requests_this_week: int = 0
    requests_this_month: int = 0
    popular_services: list[PopularService] = field(default_factory=list)
