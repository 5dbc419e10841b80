"""Service admin API. Listing is scoped to one tenant when tenant_id is given."""

from typing import Annotated

from fastapi import APIRouter, Query, Request, Response

from app.api.v1.dependencies import CategoryRepoDep, ServiceRepoDep, TenantRepoDep
from app.application.interfaces import ICategoryRepository
from app.core.constants import DEFAULT_PAGE_SIZE
from app.core.limiter import limit_writes
from app.domain.exceptions import ResourceNotFoundException
from app.schemas.service import ServiceCreate, ServicePageResponse, ServiceResponse, ServiceUpdate

router = APIRouter()

MAX_PAGE_SIZE = 100


async def _require_category(category_repo: ICategoryRepository, category_id: str) -> None:
    if await category_repo.get_by_id(category_id) is None:
        raise ResourceNotFoundException("category", category_id)


@router.get("", response_model=list[ServiceResponse] | ServicePageResponse)
async def list_services(
    service_repo: ServiceRepoDep,
    tenant_id: Annotated[str | None, Query(description="Only this tenant's services")] = None,
    category_id: Annotated[str | None, Query(description="Only this category (paged listing)")] = None,
    page_size: Annotated[
        int | None, Query(ge=1, le=MAX_PAGE_SIZE, description="Page newest first instead of listing all")
    ] = None,
    cursor: Annotated[str | None, Query(description="next_cursor of the previous page")] = None,
):
    """List services; with page_size, cursor or category_id the result is one page, newest first."""
    if page_size is not None or cursor or category_id:
        page = await service_repo.list_page(
            tenant_id=tenant_id,
            category_id=category_id,
            page_size=page_size or DEFAULT_PAGE_SIZE,
            cursor=cursor,
        )
        return ServicePageResponse.model_validate(page)
    if tenant_id:
        return await service_repo.list_by_tenant(tenant_id)
    return await service_repo.list_all()


@router.post("", response_model=ServiceResponse, status_code=201)
@limit_writes
async def create_service(
    request: Request,
    body: ServiceCreate,
    service_repo: ServiceRepoDep,
    tenant_repo: TenantRepoDep,
    category_repo: CategoryRepoDep,
):
    """Create a service for an existing tenant and category (404 when either is unknown)."""
    if await tenant_repo.get_by_id(body.tenant_id) is None:
        raise ResourceNotFoundException("tenant", body.tenant_id)
    await _require_category(category_repo, body.category_id)
    return await service_repo.create(body.to_entity())


@router.get("/{service_id}", response_model=ServiceResponse)
async def get_service(service_id: str, service_repo: ServiceRepoDep):
    service = await service_repo.get_by_id(service_id)
    if service is None:
        raise ResourceNotFoundException("service", service_id)
    return service


@router.patch("/{service_id}", response_model=ServiceResponse)
@limit_writes
async def update_service(
    request: Request,
    service_id: str,
    body: ServiceUpdate,
    service_repo: ServiceRepoDep,
    category_repo: CategoryRepoDep,
):
    if body.category_id is not None:
        await _require_category(category_repo, body.category_id)
    await service_repo.update(service_id, body.to_patch())
    return await get_service(service_id, service_repo)


@router.delete("/{service_id}", status_code=204)
@limit_writes
async def delete_service(request: Request, service_id: str, service_repo: ServiceRepoDep) -> Response:
    await service_repo.delete(service_id)
    return Response(status_code=204)
