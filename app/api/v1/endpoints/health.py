"""Health check endpoint. Reads no collection; used for liveness probes."""

from fastapi import APIRouter

from app.core.config import get_settings
from app.infrastructure.firebase import get_document_store
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return ok with the version and whether the document store is initialized."""
    return HealthResponse(
        version=get_settings().app_version,
        store_configured=get_document_store() is not None,
    )
