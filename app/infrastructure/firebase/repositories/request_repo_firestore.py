"""Firestore-backed service request repository (implements IServiceRequestRepository)."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from app.domain.entities import ServiceRequest
from app.domain.enums import RequestStatus
from app.infrastructure.firebase._rest_client import Unsubscribe
from app.infrastructure.firebase.collections import COLLECTION_REQUESTS
from app.infrastructure.firebase.query import DESCENDING, FieldFilter, OrderBy
from app.infrastructure.firebase.repositories._mappers import (
    request_from_doc,
    request_to_doc,
)
from app.infrastructure.firebase.repositories.base import FirestoreRepository
from app.shared.utils.generators import generate_cuid

logger = logging.getLogger(__name__)


class FirestoreServiceRequestRepository(FirestoreRepository[ServiceRequest]):
    """Guest requests, newest first. Never deleted in normal flows."""

    collection = COLLECTION_REQUESTS
    default_order = (OrderBy("createdAt", DESCENDING),)

    def _from_doc(self, data: dict[str, Any]) -> ServiceRequest:
        return request_from_doc(data)

    def subscribe_all(self, on_change: Callable[[list[ServiceRequest]], None]) -> Unsubscribe:
        return self._subscribe(on_change)

    def subscribe_by_tenant(
        self, tenant_id: str, on_change: Callable[[list[ServiceRequest]], None]
    ) -> Unsubscribe:
        return self._subscribe(on_change, filters=[FieldFilter("tenantId", "==", tenant_id)])

    async def list_all(self) -> list[ServiceRequest]:
        return await self._list()

    async def list_by_tenant(self, tenant_id: str) -> list[ServiceRequest]:
        return await self._list(filters=[FieldFilter("tenantId", "==", tenant_id)])

    async def create(self, request: ServiceRequest) -> ServiceRequest:
        """Store a guest submission; assigns id and both timestamps."""
        now = self._store.next_timestamp()
        request.id = request.id or generate_cuid()
        request.created_at = now
        request.updated_at = now
        await self._store.create(self.collection, request.id, request_to_doc(request))
        logger.info("Created request %s for service %s", request.id, request.service_id)
        return request

    async def update_status(self, request_id: str, status: RequestStatus) -> None:
        """Set status and updatedAt only; any status may follow any other.

        Raises DocumentNotFoundError if the request does not exist.
        """
        await self._store.update(
            self.collection,
            request_id,
            {"status": RequestStatus(status).value, "updatedAt": self._store.next_timestamp()},
        )
        logger.info("Request %s status -> %s", request_id, RequestStatus(status).value)
