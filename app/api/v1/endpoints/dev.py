"""Development tools: seed and reset the demo dataset (403 outside development)."""

from fastapi import APIRouter

from app.api.v1.dependencies import SeedServiceDep
from app.schemas.dev import SeedResponse

router = APIRouter()


@router.post("/seed", response_model=SeedResponse)
async def seed(seed_service: SeedServiceDep):
    """Seed empty collections; a populated store is left as is (all counts 0)."""
    return await seed_service.seed()


@router.post("/reset", response_model=SeedResponse)
async def reset(seed_service: SeedServiceDep):
    """Delete all tenants and services, then seed again (categories are kept when present)."""
    return await seed_service.reset()
