"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference domain entities only; no infrastructure imports.
Subscriptions return an unsubscribe callable that is safe to call twice.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from app.application.dtos.catalog import ServicePage
from app.core.constants import DEFAULT_PAGE_SIZE
from app.domain.entities import Service, ServiceCategory, ServiceRequest, Tenant
from app.domain.enums import RequestStatus

Unsubscribe = Callable[[], None]


class ITenantRepository(Protocol):
    """Protocol for tenant repository (DIP)."""

    def subscribe_all(self, on_change: Callable[[list[Tenant]], None]) -> Unsubscribe:
        """Live list of all tenants, newest first."""

    async def get_by_id(self, entity_id: str) -> Tenant | None:
        """Return tenant by ID."""

    async def get_by_slug(self, slug: str) -> Tenant | None:
        """Return tenant by exact slug."""

    async def list_all(self) -> list[Tenant]:
        """Return all tenants, newest first."""

    async def create(self, tenant: Tenant) -> Tenant:
        """Create tenant (unique slug)."""

    async def update(self, tenant_id: str, patch: dict[str, Any]) -> None:
        """Merge partial update."""

    async def delete(self, entity_id: str) -> None:
        """Delete tenant (its services are not deleted)."""


class ICategoryRepository(Protocol):
    """Protocol for service category repository (DIP)."""

    def subscribe_all(self, on_change: Callable[[list[ServiceCategory]], None]) -> Unsubscribe:
        """Live list ordered by display order."""

    async def get_by_id(self, entity_id: str) -> ServiceCategory | None:
        """Return category by ID."""

    async def list_all(self) -> list[ServiceCategory]:
        """Return all categories ordered by display order."""

    async def create(self, category: ServiceCategory) -> ServiceCategory:
        """Create category."""

    async def update(self, category_id: str, patch: dict[str, Any]) -> None:
        """Merge partial update."""

    async def delete(self, entity_id: str) -> None:
        """Delete category."""


class IServiceRepository(Protocol):
    """Protocol for service repository (DIP)."""

    def subscribe_all(self, on_change: Callable[[list[Service]], None]) -> Unsubscribe:
        """Live list of every service."""

    def subscribe_by_tenant(
        self, tenant_id: str, on_change: Callable[[list[Service]], None]
    ) -> Unsubscribe:
        """Live list of one tenant's services, ordered by display order."""

    async def get_by_id(self, entity_id: str) -> Service | None:
        """Return service by ID."""

    async def list_all(self) -> list[Service]:
        """Return every service."""

    async def list_by_tenant(self, tenant_id: str) -> list[Service]:
        """Return one tenant's services ordered by display order."""

    async def list_page(
        self,
        tenant_id: str | None = None,
        category_id: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        cursor: str | None = None,
    ) -> ServicePage:
        """Return one page of services, newest first, resuming after ``cursor``."""

    async def create(self, service: Service) -> Service:
        """Create service."""

    async def update(self, service_id: str, patch: dict[str, Any]) -> None:
        """Merge partial update."""

    async def delete(self, entity_id: str) -> None:
        """Delete service."""


class IServiceRequestRepository(Protocol):
    """Protocol for service request repository (DIP)."""

    def subscribe_all(self, on_change: Callable[[list[ServiceRequest]], None]) -> Unsubscribe:
        """Live list of all requests, newest first."""

    def subscribe_by_tenant(
        self, tenant_id: str, on_change: Callable[[list[ServiceRequest]], None]
    ) -> Unsubscribe:
        """Live list of one tenant's requests, newest first."""

    async def get_by_id(self, entity_id: str) -> ServiceRequest | None:
        """Return request by ID."""

    async def list_all(self) -> list[ServiceRequest]:
        """Return all requests, newest first."""

    async def list_by_tenant(self, tenant_id: str) -> list[ServiceRequest]:
        """Return one tenant's requests, newest first."""

    async def create(self, request: ServiceRequest) -> ServiceRequest:
        """Store a guest submission."""

    async def update_status(self, request_id: str, status: RequestStatus) -> None:
        """Set status and updatedAt only."""
