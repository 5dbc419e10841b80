"""Firestore-backed tenant repository (implements ITenantRepository)."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from app.domain.entities import Tenant
from app.domain.exceptions import TenantSlugTakenException
from app.infrastructure.firebase._rest_client import Unsubscribe
from app.infrastructure.firebase.collections import COLLECTION_TENANTS
from app.infrastructure.firebase.query import DESCENDING, FieldFilter, OrderBy
from app.infrastructure.firebase.repositories._mappers import (
    patch_to_doc,
    tenant_from_doc,
    tenant_to_doc,
)
from app.infrastructure.firebase.repositories.base import FirestoreRepository
from app.shared.utils.generators import generate_cuid

logger = logging.getLogger(__name__)


class FirestoreTenantRepository(FirestoreRepository[Tenant]):
    """Tenants collection. Slug is unique and is the portal's lookup key."""

    collection = COLLECTION_TENANTS
    default_order = (OrderBy("createdAt", DESCENDING),)

    def _from_doc(self, data: dict[str, Any]) -> Tenant:
        return tenant_from_doc(data)

    def subscribe_all(self, on_change: Callable[[list[Tenant]], None]) -> Unsubscribe:
        """Live list of all tenants, newest first."""
        return self._subscribe(on_change)

    async def list_all(self) -> list[Tenant]:
        return await self._list()

    async def get_by_slug(self, slug: str) -> Tenant | None:
        """Return the tenant whose slug equals slug exactly (case-sensitive), or None."""
        docs = await self._store.list(
            self.collection, filters=[FieldFilter("slug", "==", slug)], limit=1
        )
        return tenant_from_doc(docs[0]) if docs else None

    async def _ensure_slug_free(self, slug: str, tenant_id: str | None = None) -> None:
        existing = await self.get_by_slug(slug)
        if existing is not None and existing.id != tenant_id:
            raise TenantSlugTakenException(slug)

    async def create(self, tenant: Tenant) -> Tenant:
        """Create tenant; assigns an id when tenant.id is empty and stamps both timestamps.

        Raises TenantSlugTakenException if another tenant already has the slug.
        """
        await self._ensure_slug_free(tenant.slug)
        now = self._store.next_timestamp()
        tenant.id = tenant.id or generate_cuid()
        tenant.created_at = now
        tenant.updated_at = now
        await self._store.create(self.collection, tenant.id, tenant_to_doc(tenant))
        logger.info("Created tenant %s (%s)", tenant.id, tenant.slug)
        return tenant

    async def update(self, tenant_id: str, patch: dict[str, Any]) -> None:
        """Merge patch (entity attribute names) into the tenant and set updatedAt.

        Raises DocumentNotFoundError if the tenant does not exist and
        TenantSlugTakenException if the new slug belongs to another tenant.
        """
        if patch.get("slug"):
            await self._ensure_slug_free(patch["slug"], tenant_id)
        data = patch_to_doc(patch)
        data["updatedAt"] = self._store.next_timestamp()
        await self._store.update(self.collection, tenant_id, data)
