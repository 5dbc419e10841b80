"""Guest portal use case: resolve a tenant by slug, list its offer, submit a request."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.dtos.portal import GuestPortal, GuestRequestForm
from app.application.stores.categories import categories_in_use
from app.domain.entities import Service, ServiceRequest, Tenant
from app.domain.enums import RequestStatus
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.shared.utils.sanitization import InputSanitizer

if TYPE_CHECKING:
    from app.application.interfaces.repositories import (
        ICategoryRepository,
        IServiceRepository,
        IServiceRequestRepository,
        ITenantRepository,
    )

logger = logging.getLogger(__name__)


class GuestPortalService:
    """Read and submit paths of the public portal. Guests only see active data of one tenant."""

    def __init__(
        self,
        tenant_repo: "ITenantRepository",
        service_repo: "IServiceRepository",
        category_repo: "ICategoryRepository",
        request_repo: "IServiceRequestRepository",
    ) -> None:
        self.tenant_repo = tenant_repo
        self.service_repo = service_repo
        self.category_repo = category_repo
        self.request_repo = request_repo

    async def _get_tenant(self, slug: str) -> Tenant | None:
        tenant = await self.tenant_repo.get_by_slug(slug)
        if tenant is None or not tenant.active:
            return None
        return tenant

    async def _active_services(self, tenant_id: str) -> list[Service]:
        services = await self.service_repo.list_by_tenant(tenant_id)
        return [s for s in services if s.active and s.tenant_id == tenant_id]

    async def get_portal(self, slug: str) -> GuestPortal | None:
        """Return the tenant's portal, or None for an unknown or inactive slug."""
        tenant = await self._get_tenant(slug)
        if tenant is None:
            return None
        services = await self._active_services(tenant.id)
        categories = [c for c in await self.category_repo.list_all() if c.active]
        return GuestPortal(
            tenant=tenant,
            services=services,
            categories=categories_in_use(categories, services),
            featured=[s for s in services if s.featured],
        )

    async def get_service(self, slug: str, service_id: str) -> Service | None:
        """Return an active service of the slug's tenant; another tenant's service is None."""
        tenant = await self._get_tenant(slug)
        if tenant is None:
            return None
        service = await self.service_repo.get_by_id(service_id)
        if service is None or service.tenant_id != tenant.id or not service.active:
            return None
        return service

    async def submit_request(
        self, slug: str, service_id: str, form: GuestRequestForm
    ) -> ServiceRequest:
        """Create a pending request with a snapshot of the service name and price.

        Raises:
            ResourceNotFoundException: unknown tenant slug or service.
            ValidationException: empty guest name or unknown tier.
        """
        tenant = await self._get_tenant(slug)
        if tenant is None:
            raise ResourceNotFoundException("tenant", slug)
        service = await self.get_service(slug, service_id)
        if service is None:
            raise ResourceNotFoundException("service", service_id)

        guest_name = InputSanitizer.sanitize_text(form.guest_name)
        if not guest_name:
            raise ValidationException("Guest name is required", field="guest_name")

        tier = None
        if form.selected_tier:
            tier = service.get_tier(form.selected_tier)
            if tier is None:
                raise ValidationException(
                    f"Unknown tier '{form.selected_tier}' for service {service.id}",
                    field="selected_tier",
                )

        request = ServiceRequest(
            id="",
            tenant_id=tenant.id,
            service_id=service.id,
            service_name=service.name,
            category_id=service.category_id,
            guest_name=guest_name,
            guest_email=InputSanitizer.sanitize_email(form.guest_email) or None,
            guest_phone=InputSanitizer.sanitize_phone(form.guest_phone) or None,
            status=RequestStatus.PENDING,
            selected_tier=tier.id if tier else None,
            selected_tier_label=tier.name if tier else None,
            quantity=form.quantity,
            date=form.date,
            time=InputSanitizer.sanitize_text(form.time) or None,
            notes=InputSanitizer.sanitize_text(form.notes) or None,
            price=service.price_for_tier(tier.id if tier else None),
            currency=service.currency,
        )
        created = await self.request_repo.create(request)
        logger.info("Guest request %s submitted for %s/%s", created.id, slug, service.id)
        return created
