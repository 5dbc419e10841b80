"""Tenant admin API: thin routes over the tenant repository."""

import logging

from fastapi import APIRouter, Request, Response

from app.api.v1.dependencies import TenantRepoDep
from app.core.limiter import limit_writes
from app.domain.exceptions import ResourceNotFoundException
from app.schemas.tenant import TenantCreate, TenantResponse, TenantUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[TenantResponse])
async def list_tenants(tenant_repo: TenantRepoDep):
    """All tenants, newest first."""
    return await tenant_repo.list_all()


@router.post("", response_model=TenantResponse, status_code=201)
@limit_writes
async def create_tenant(request: Request, body: TenantCreate, tenant_repo: TenantRepoDep):
    """Create a tenant; 409 TENANT_SLUG_TAKEN when the slug is in use."""
    return await tenant_repo.create(body.to_entity())


@router.get("/{tenant_id}", response_model=TenantResponse)
async def get_tenant(tenant_id: str, tenant_repo: TenantRepoDep):
    tenant = await tenant_repo.get_by_id(tenant_id)
    if tenant is None:
        raise ResourceNotFoundException("tenant", tenant_id)
    return tenant


@router.patch("/{tenant_id}", response_model=TenantResponse)
@limit_writes
async def update_tenant(
    request: Request, tenant_id: str, body: TenantUpdate, tenant_repo: TenantRepoDep
):
    """Merge the fields sent into the tenant and return the stored result."""
    await tenant_repo.update(tenant_id, body.to_patch())
    return await get_tenant(tenant_id, tenant_repo)


@router.delete("/{tenant_id}", status_code=204)
@limit_writes
async def delete_tenant(request: Request, tenant_id: str, tenant_repo: TenantRepoDep) -> Response:
    """Delete the tenant document only; its services and requests stay."""
    await tenant_repo.delete(tenant_id)
    logger.info("Tenant %s deleted", tenant_id)
    return Response(status_code=204)
