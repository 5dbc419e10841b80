"""Dashboard use case: request counts and most requested services."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from app.application.dtos.dashboard import DashboardStats, PopularService
from app.domain.entities import ServiceRequest
from app.domain.enums import RequestStatus
from app.shared.utils.datetime import ensure_utc, utc_now
from app.shared.utils.format import get_localized_text

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IServiceRequestRepository

POPULAR_SERVICES_LIMIT = 5


def compute_dashboard_stats(
    requests: Iterable[ServiceRequest], now: datetime | None = None
) -> DashboardStats:
    """Aggregate requests.

    "This week" is the last 7 days up to now; "this month" is the calendar
    month of now (UTC). Popular services are the top 5 by request count,
    ties broken by name.
    """
    now = ensure_utc(now) if now is not None else utc_now()
    week_start = now - timedelta(days=7)
    month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

    stats = DashboardStats()
    counts: Counter[str] = Counter()
    names: dict[str, str] = {}
    for request in requests:
        stats.total_requests += 1
        if request.status == RequestStatus.PENDING:
            stats.pending_requests += 1
        elif request.status == RequestStatus.COMPLETED:
            stats.completed_requests += 1
        if request.created_at is not None:
            created = ensure_utc(request.created_at)
            if week_start <= created <= now:
                stats.requests_this_week += 1
            if month_start <= created <= now:
                stats.requests_this_month += 1
        counts[request.service_id] += 1
        names.setdefault(request.service_id, get_localized_text(request.service_name))

    ranked = sorted(counts.items(), key=lambda item: (-item[1], names[item[0]]))
    stats.popular_services = [
        PopularService(service_id=service_id, service_name=names[service_id], count=count)
        for service_id, count in ranked[:POPULAR_SERVICES_LIMIT]
    ]
    return stats


class GetDashboardStatsUseCase:
    """Dashboard stats across all tenants or for one tenant."""

    def __init__(self, request_repo: "IServiceRequestRepository") -> None:
        self.request_repo = request_repo

    async def get_dashboard_stats(self, tenant_id: str | None = None) -> DashboardStats:
        if tenant_id:
            requests = await self.request_repo.list_by_tenant(tenant_id)
        else:
            requests = await self.request_repo.list_all()
        return compute_dashboard_stats(requests)
