"""Base Firestore repository: id lookup, delete, listing and live subscriptions."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from app.infrastructure.firebase._rest_client import Unsubscribe
from app.infrastructure.firebase.collections import COLLECTION_CONTEXTS
from app.infrastructure.firebase.document_store import DocumentStore
from app.infrastructure.firebase.query import FieldFilter, OrderBy
from app.shared.enums import ListenerContext

logger = logging.getLogger(__name__)


class FirestoreRepository[EntityT]:
    """Generic collection accessor over a DocumentStore.

    Subclasses set ``collection`` and implement ``_from_doc``. ``default_order``
    is applied to subscriptions and listings unless a method passes its own.
    """

    collection: str
    default_order: tuple[OrderBy, ...] = ()

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    @property
    def context(self) -> ListenerContext:
        return COLLECTION_CONTEXTS[self.collection]

    def _from_doc(self, data: dict[str, Any]) -> EntityT:
        raise NotImplementedError

    def _map_documents(self, docs: Sequence[dict[str, Any]]) -> list[EntityT]:
        """Map documents in order; a document that cannot be mapped is logged and skipped."""
        entities: list[EntityT] = []
        for data in docs:
            try:
                entities.append(self._from_doc(data))
            except (KeyError, TypeError, ValueError, AttributeError) as exc:
                logger.warning("Skipping malformed %s/%s: %s", self.collection, data.get("id"), exc)
        return entities

    async def get_by_id(self, entity_id: str) -> EntityT | None:
        """Return the entity, or None when no document has this id."""
        data = await self._store.get(self.collection, entity_id)
        return self._from_doc(data) if data is not None else None

    async def delete(self, entity_id: str) -> None:
        """Delete one document; nothing else is removed."""
        await self._store.delete(self.collection, entity_id)
        logger.info("Deleted %s/%s", self.collection, entity_id)

    async def _list(
        self,
        filters: Sequence[FieldFilter] = (),
        order_by: Sequence[OrderBy] | None = None,
        limit: int | None = None,
    ) -> list[EntityT]:
        docs = await self._store.list(
            self.collection,
            filters=filters,
            order_by=self.default_order if order_by is None else order_by,
            limit=limit,
        )
        return self._map_documents(docs)

    def _subscribe(
        self,
        on_change: Callable[[list[EntityT]], None],
        filters: Sequence[FieldFilter] = (),
        order_by: Sequence[OrderBy] | None = None,
    ) -> Unsubscribe:
        def handle(docs: list[dict[str, Any]]) -> None:
            on_change(self._map_documents(docs))

        return self._store.subscribe(
            self.collection,
            handle,
            context=self.context,
            filters=filters,
            order_by=self.default_order if order_by is None else order_by,
        )
