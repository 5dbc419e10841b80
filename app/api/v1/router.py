"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from app.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    categories,
    dev,
    health,
    portal,
    requests,
    services,
    tenants,
    websocket as ws_endpoint,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(tenants.router, prefix="/tenants", tags=["tenants"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(services.router, prefix="/services", tags=["services"])
api_router.include_router(requests.router, prefix="/requests", tags=["requests"])
api_router.include_router(portal.router, prefix="/portal", tags=["portal"])
api_router.include_router(dev.router, prefix="/dev", tags=["dev"])
api_router.include_router(ws_endpoint.router, tags=["websocket"])
