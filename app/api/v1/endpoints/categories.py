"""Service category admin API (global taxonomy)."""

from fastapi import APIRouter, Request, Response

from app.api.v1.dependencies import CategoryRepoDep
from app.core.limiter import limit_writes
from app.domain.exceptions import ResourceNotFoundException
from app.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate

router = APIRouter()


@router.get("", response_model=list[CategoryResponse])
async def list_categories(category_repo: CategoryRepoDep):
    return await category_repo.list_all()


@router.post("", response_model=CategoryResponse, status_code=201)
@limit_writes
async def create_category(request: Request, body: CategoryCreate, category_repo: CategoryRepoDep):
    """Create a category; 409 when a category with the given id exists."""
    return await category_repo.create(body.to_entity())


@router.patch("/{category_id}", response_model=CategoryResponse)
@limit_writes
async def update_category(
    request: Request, category_id: str, body: CategoryUpdate, category_repo: CategoryRepoDep
):
    await category_repo.update(category_id, body.to_patch())
    category = await category_repo.get_by_id(category_id)
    if category is None:
        raise ResourceNotFoundException("category", category_id)
    return category


@router.delete("/{category_id}", status_code=204)
@limit_writes
async def delete_category(request: Request, category_id: str, category_repo: CategoryRepoDep) -> Response:
    """Delete the category; services keep their categoryId."""
    await category_repo.delete(category_id)
    return Response(status_code=204)
