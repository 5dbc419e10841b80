"""Service request admin API: list, inspect, re-status, dashboard stats."""

from typing import Annotated

from fastapi import APIRouter, Query, Request

from app.api.v1.dependencies import DashboardDep, RequestRepoDep
from app.core.limiter import limit_writes
from app.domain.exceptions import ResourceNotFoundException
from app.schemas.service_request import (
    DashboardStatsResponse,
    RequestStatusUpdate,
    ServiceRequestResponse,
)

router = APIRouter()

TenantFilter = Annotated[str | None, Query(description="Only this tenant's requests")]


@router.get("", response_model=list[ServiceRequestResponse])
async def list_requests(request_repo: RequestRepoDep, tenant_id: TenantFilter = None):
    """Requests newest first."""
    if tenant_id:
        return await request_repo.list_by_tenant(tenant_id)
    return await request_repo.list_all()


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_request_stats(dashboard: DashboardDep, tenant_id: TenantFilter = None):
    """Dashboard counts for all tenants or one tenant."""
    return await dashboard.get_dashboard_stats(tenant_id)


@router.get("/{request_id}", response_model=ServiceRequestResponse)
async def get_request(request_id: str, request_repo: RequestRepoDep):
    service_request = await request_repo.get_by_id(request_id)
    if service_request is None:
        raise ResourceNotFoundException("request", request_id)
    return service_request


@router.patch("/{request_id}/status", response_model=ServiceRequestResponse)
@limit_writes
async def update_request_status(
    request: Request,
    request_id: str,
    body: RequestStatusUpdate,
    request_repo: RequestRepoDep,
):
    """Set status; no transition rules are applied."""
    await request_repo.update_status(request_id, body.status)
    return await get_request(request_id, request_repo)
