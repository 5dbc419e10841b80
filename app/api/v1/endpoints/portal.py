"""Guest portal API: public, resolved by tenant slug."""

import logging

from fastapi import APIRouter, Request

from app.api.v1.dependencies import GuestPortalDep
from app.core.limiter import limit_guest_requests
from app.domain.exceptions import ResourceNotFoundException
from app.schemas.portal import GuestPortalResponse, GuestRequestCreate
from app.schemas.service import ServiceResponse
from app.schemas.service_request import ServiceRequestResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{slug}", response_model=GuestPortalResponse)
async def get_portal(slug: str, portal: GuestPortalDep):
    """Active services and categories of the tenant; 404 for unknown or inactive slugs."""
    result = await portal.get_portal(slug)
    if result is None:
        raise ResourceNotFoundException("tenant", slug)
    return result


@router.get("/{slug}/services/{service_id}", response_model=ServiceResponse)
async def get_portal_service(slug: str, service_id: str, portal: GuestPortalDep):
    service = await portal.get_service(slug, service_id)
    if service is None:
        raise ResourceNotFoundException("service", service_id)
    return service


@router.post("/{slug}/requests", response_model=ServiceRequestResponse, status_code=201)
@limit_guest_requests
async def submit_guest_request(
    request: Request, slug: str, body: GuestRequestCreate, portal: GuestPortalDep
):
    """Submit a booking request (status pending). Rate limited per client address."""
    return await portal.submit_request(slug, body.service_id, body.to_form())
