"""Firestore-backed service repository (implements IServiceRepository)."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from app.application.dtos.catalog import ServicePage
from app.core.constants import DEFAULT_PAGE_SIZE
from app.domain.entities import Service
from app.domain.exceptions import ValidationException
from app.infrastructure.firebase._rest_client import Unsubscribe
from app.infrastructure.firebase.collections import COLLECTION_SERVICES
from app.infrastructure.firebase.query import ASCENDING, DESCENDING, DOCUMENT_ID, FieldFilter, OrderBy
from app.infrastructure.firebase.repositories._mappers import (
    patch_to_doc,
    service_from_doc,
    service_to_doc,
)
from app.infrastructure.firebase.repositories.base import FirestoreRepository
from app.shared.utils.generators import generate_cuid

logger = logging.getLogger(__name__)

# Newest first; the document id breaks createdAt ties so cursors are exact
_PAGE_ORDER = (OrderBy("createdAt", DESCENDING), OrderBy(DOCUMENT_ID, DESCENDING))


class FirestoreServiceRepository(FirestoreRepository[Service]):
    """Services collection; every service belongs to exactly one tenant (tenantId)."""

    collection = COLLECTION_SERVICES
    default_order = (OrderBy("order", ASCENDING),)

    def _from_doc(self, data: dict[str, Any]) -> Service:
        return service_from_doc(data)

    @staticmethod
    def _tenant_filter(tenant_id: str) -> list[FieldFilter]:
        return [FieldFilter("tenantId", "==", tenant_id)]

    def subscribe_all(self, on_change: Callable[[list[Service]], None]) -> Unsubscribe:
        """Live list of every tenant's services (unordered, like the admin overview)."""
        return self._subscribe(on_change, order_by=())

    def subscribe_by_tenant(
        self, tenant_id: str, on_change: Callable[[list[Service]], None]
    ) -> Unsubscribe:
        """Live list of one tenant's services ordered by display order."""
        return self._subscribe(on_change, filters=self._tenant_filter(tenant_id))

    async def list_all(self) -> list[Service]:
        return await self._list(order_by=())

    async def list_by_tenant(self, tenant_id: str) -> list[Service]:
        return await self._list(filters=self._tenant_filter(tenant_id))

    async def list_page(
        self,
        tenant_id: str | None = None,
        category_id: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        cursor: str | None = None,
    ) -> ServicePage:
        """Page through services newest first, optionally within one tenant and/or category.

        Fetches one row beyond ``page_size`` to know whether another page follows.
        ``cursor`` is the ``next_cursor`` of the previous page.

        Raises:
            ValidationException: the cursor names no service.
        """
        filters = self._tenant_filter(tenant_id) if tenant_id else []
        if category_id:
            filters.append(FieldFilter("categoryId", "==", category_id))
        start_after: tuple = ()
        if cursor:
            anchor = await self._store.get(self.collection, cursor)
            if anchor is None or "createdAt" not in anchor:
                raise ValidationException(f"Unknown page cursor '{cursor}'", field="cursor")
            start_after = (anchor["createdAt"], cursor)
        docs = await self._store.list(
            self.collection,
            filters=filters,
            order_by=_PAGE_ORDER,
            limit=page_size + 1,
            start_after=start_after,
        )
        has_more = len(docs) > page_size
        docs = docs[:page_size]
        return ServicePage(
            items=self._map_documents(docs),
            next_cursor=docs[-1]["id"] if has_more else None,
            has_more=has_more,
        )

    async def create(self, service: Service) -> Service:
        """Create service; assigns an id when service.id is empty and stamps timestamps."""
        now = self._store.next_timestamp()
        service.id = service.id or generate_cuid()
        service.created_at = now
        service.updated_at = now
        await self._store.create(self.collection, service.id, service_to_doc(service))
        logger.info("Created service %s for tenant %s", service.id, service.tenant_id)
        return service

    async def update(self, service_id: str, patch: dict[str, Any]) -> None:
        """Merge patch into the service and set updatedAt (last writer wins per field)."""
        data = patch_to_doc(patch)
        data["updatedAt"] = self._store.next_timestamp()
        await self._store.update(self.collection, service_id, data)
