"""Firestore-backed service category repository (implements ICategoryRepository)."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from app.domain.entities import ServiceCategory
from app.infrastructure.firebase._rest_client import Unsubscribe
from app.infrastructure.firebase.collections import COLLECTION_CATEGORIES
from app.infrastructure.firebase.query import ASCENDING, OrderBy
from app.infrastructure.firebase.repositories._mappers import (
    category_from_doc,
    category_to_doc,
    patch_to_doc,
)
from app.infrastructure.firebase.repositories.base import FirestoreRepository
from app.shared.utils.generators import generate_cuid


class FirestoreCategoryRepository(FirestoreRepository[ServiceCategory]):
    """Global categories; no timestamps, ordered by their display order."""

    collection = COLLECTION_CATEGORIES
    default_order = (OrderBy("order", ASCENDING),)

    def _from_doc(self, data: dict[str, Any]) -> ServiceCategory:
        return category_from_doc(data)

    def subscribe_all(self, on_change: Callable[[list[ServiceCategory]], None]) -> Unsubscribe:
        return self._subscribe(on_change)

    async def list_all(self) -> list[ServiceCategory]:
        return await self._list()

    async def create(self, category: ServiceCategory) -> ServiceCategory:
        category.id = category.id or generate_cuid()
        await self._store.create(self.collection, category.id, category_to_doc(category))
        return category

    async def update(self, category_id: str, patch: dict[str, Any]) -> None:
        """Merge patch into the category (raises DocumentNotFoundError if missing)."""
        await self._store.update(self.collection, category_id, patch_to_doc(patch, immutable=("id",)))
