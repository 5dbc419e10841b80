"""In-process Firestore stand-in with the same fluent API as FirestoreRESTClient.

Used for local development without credentials and for tests. Documents are
deep-copied on the way in and out, datetimes are stored as Timestamp like the
real store, and UNSET values are rejected the way Firestore rejects undefined.
Listeners are notified from the event loop after each committed write.
"""

from __future__ import annotations

import asyncio
import copy
import logging
from collections.abc import AsyncIterator
from typing import Any

from app.infrastructure.exceptions import (
    DocumentExistsError,
    DocumentNotFoundError,
    PermissionDeniedError,
)
from app.infrastructure.firebase._rest_client import (
    DocumentSnapshot,
    ErrorCallback,
    SnapshotCallback,
    Unsubscribe,
)
from app.infrastructure.firebase.query import (
    ASCENDING,
    DESCENDING,
    DOCUMENT_ID,
    FieldFilter,
    OrderBy,
    get_field,
    is_after_cursor,
    matches,
    sort_key,
)
from app.infrastructure.firebase.timestamps import encode_timestamps
from app.shared.utils.unset import UNSET

logger = logging.getLogger(__name__)


def _check_no_unset(value: Any, path: str) -> None:
    if value is UNSET:
        raise TypeError(f"Unsupported field value: undefined (found in field {path})")
    if isinstance(value, dict):
        for k, v in value.items():
            _check_no_unset(v, f"{path}.{k}" if path else k)
    elif isinstance(value, (list, tuple)):
        for v in value:
            _check_no_unset(v, path)


def _prepare(data: dict[str, Any]) -> dict[str, Any]:
    _check_no_unset(data, "")
    return copy.deepcopy(encode_timestamps(data))


class _MemoryListener:
    def __init__(
        self,
        query: MemoryQuery,
        callback: SnapshotCallback,
        on_error: ErrorCallback,
    ) -> None:
        self.query = query
        self._callback = callback
        self._on_error = on_error
        self._loop = asyncio.get_running_loop()
        self._last: list[DocumentSnapshot] | None = None
        self.active = True

    def schedule(self) -> None:
        if self.active:
            self._loop.call_soon_threadsafe(self._deliver)

    def _deliver(self) -> None:
        if not self.active:
            return
        try:
            docs = self.query._run()
            if docs != self._last:
                self._last = docs
                self._callback(docs)
        except Exception as exc:
            self.unsubscribe()
            logger.warning("Listener on %s failed: %s", self.query.collection_id, exc)
            self._on_error(exc)

    def unsubscribe(self) -> None:
        self.active = False
        self.query._client._listeners.discard(self)


class MemoryDocumentReference:
    def __init__(self, client: InMemoryFirestoreClient, collection_id: str, document_id: str):
        self._client = client
        self._collection_id = collection_id
        self.id = document_id

    @property
    def path(self) -> str:
        return f"{self._collection_id}/{self.id}"

    async def set(self, data: dict[str, Any]) -> None:
        self._client._check_access(self._collection_id)
        self._client._docs(self._collection_id)[self.id] = _prepare(data)
        self._client._notify(self._collection_id)

    async def update(self, data: dict[str, Any]) -> None:
        self._client._check_access(self._collection_id)
        docs = self._client._docs(self._collection_id)
        if self.id not in docs:
            raise DocumentNotFoundError(self.path)
        docs[self.id].update(_prepare(data))
        self._client._notify(self._collection_id)

    async def get(self) -> DocumentSnapshot | None:
        self._client._check_access(self._collection_id)
        data = self._client._docs(self._collection_id).get(self.id)
        if data is None:
            return None
        return DocumentSnapshot(self.id, copy.deepcopy(data))

    async def delete(self) -> None:
        self._client._check_access(self._collection_id)
        if self._client._docs(self._collection_id).pop(self.id, None) is not None:
            self._client._notify(self._collection_id)


class MemoryQuery:
    def __init__(
        self,
        client: InMemoryFirestoreClient,
        collection_id: str,
        filters: tuple[FieldFilter, ...] = (),
        orders: tuple[OrderBy, ...] = (),
        limit: int | None = None,
        offset: int = 0,
        cursor: tuple[Any, ...] = (),
    ):
        self._client = client
        self.collection_id = collection_id
        self._filters = filters
        self._orders = orders
        self._limit = limit
        self._offset = offset
        self._cursor = cursor

    def _copy(self, **changes: Any) -> MemoryQuery:
        state = {
            "filters": self._filters,
            "orders": self._orders,
            "limit": self._limit,
            "offset": self._offset,
            "cursor": self._cursor,
        }
        state.update(changes)
        return MemoryQuery(self._client, self.collection_id, **state)

    def where(self, field: str, op: str, value: Any) -> MemoryQuery:
        return self._copy(filters=(*self._filters, FieldFilter(field, op, encode_timestamps(value))))

    def order_by(self, field: str, direction: str = ASCENDING) -> MemoryQuery:
        return self._copy(orders=(*self._orders, OrderBy(field, direction)))  # type: ignore[arg-type]

    def limit(self, n: int) -> MemoryQuery:
        return self._copy(limit=n)

    def offset(self, n: int) -> MemoryQuery:
        return self._copy(offset=n)

    def start_after(self, *values: Any) -> MemoryQuery:
        """Resume after the row whose order_by values are ``values`` (one per order_by)."""
        return self._copy(cursor=tuple(encode_timestamps(list(values))))

    @staticmethod
    def _field(doc_id: str, data: dict[str, Any], path: str) -> tuple[bool, Any]:
        if path == DOCUMENT_ID:
            return True, doc_id
        return get_field(data, path)

    def _run(self) -> list[DocumentSnapshot]:
        self._client._check_access(self.collection_id)
        rows = [
            (doc_id, data)
            for doc_id, data in self._client._docs(self.collection_id).items()
            if all(matches(data, f) for f in self._filters)
        ]
        # Documents missing an order_by field are excluded, as in Firestore.
        rows = [r for r in rows if all(self._field(*r, o.field)[0] for o in self._orders)]
        rows.sort(key=lambda r: r[0])
        for order in reversed(self._orders):
            rows.sort(
                key=lambda r, f=order.field: sort_key(self._field(*r, f)[1]),
                reverse=order.direction == DESCENDING,
            )
        if self._cursor:
            rows = [
                r for r in rows
                if is_after_cursor([self._field(*r, o.field)[1] for o in self._orders], self._cursor, self._orders)
            ]
        rows = rows[self._offset:]
        if self._limit:
            rows = rows[: self._limit]
        return [DocumentSnapshot(doc_id, copy.deepcopy(data)) for doc_id, data in rows]

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        for snapshot in self._run():
            yield snapshot

    async def get(self) -> list[DocumentSnapshot]:
        return self._run()

    def on_snapshot(self, callback: SnapshotCallback, on_error: ErrorCallback) -> Unsubscribe:
        """Deliver the current result set, then again after every change that alters it."""
        listener = _MemoryListener(self, callback, on_error)
        self._client._listeners.add(listener)
        listener.schedule()
        return listener.unsubscribe


class MemoryCollectionReference(MemoryQuery):
    def __init__(self, client: InMemoryFirestoreClient, collection_id: str):
        super().__init__(client, collection_id)

    def document(self, document_id: str) -> MemoryDocumentReference:
        return MemoryDocumentReference(self._client, self.collection_id, document_id)

    async def create(self, document_id: str, data: dict[str, Any]) -> None:
        self._client._check_access(self.collection_id)
        docs = self._client._docs(self.collection_id)
        if document_id in docs:
            raise DocumentExistsError(f"{self.collection_id}/{document_id}")
        docs[document_id] = _prepare(data)
        self._client._notify(self.collection_id)


class InMemoryFirestoreClient:
    """Dict-backed Firestore client for development and tests."""

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}
        self._denied: set[str] = set()
        self._listeners: set[_MemoryListener] = set()

    def _docs(self, collection_id: str) -> dict[str, dict[str, Any]]:
        return self._collections.setdefault(collection_id, {})

    def _check_access(self, collection_id: str) -> None:
        if collection_id in self._denied:
            raise PermissionDeniedError()

    def _notify(self, collection_id: str) -> None:
        for listener in list(self._listeners):
            if listener.query.collection_id == collection_id:
                listener.schedule()

    def collection(self, collection_id: str) -> MemoryCollectionReference:
        return MemoryCollectionReference(self, collection_id)

    def deny(self, collection_id: str) -> None:
        """Reject every operation on a collection with permission-denied.

        Active listeners on that collection receive the error and stop.
        """
        self._denied.add(collection_id)
        self._notify(collection_id)

    def allow(self, collection_id: str) -> None:
        self._denied.discard(collection_id)

    async def batch_write(self, writes: list[dict[str, Any]]) -> None:
        """Apply writes all-or-nothing; same write format as FirestoreRESTClient.batch_write."""
        touched: set[str] = set()
        for w in writes:
            collection_id = w["path"].split("/", 1)[0]
            self._check_access(collection_id)
            touched.add(collection_id)
        prepared = [(w["path"], None if w.get("delete") else _prepare(w["data"])) for w in writes]
        for path, data in prepared:
            collection_id, document_id = path.split("/", 1)
            if data is None:
                self._docs(collection_id).pop(document_id, None)
            else:
                self._docs(collection_id)[document_id] = data
        for collection_id in touched:
            self._notify(collection_id)

    async def aclose(self) -> None:
        for listener in list(self._listeners):
            listener.unsubscribe()
