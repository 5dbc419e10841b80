"""Collection-scoped CRUD and live subscriptions over a Firestore client.

DocumentStore hides two store quirks from the rest of the application:

- Firestore rejects undefined values. Every write strips ``UNSET`` at any
  depth (dict keys are dropped, list elements removed) so the key is absent
  in the stored document rather than null.
- Date/time values are stored as the native ``Timestamp``. Writes convert
  ``datetime`` to ``Timestamp`` and reads convert back to UTC ``datetime``.

Documents are returned as plain dicts with the document id under ``"id"``.
Not-found on ``get`` is ``None``; other one-shot failures raise
``FirestoreAPIError`` subclasses. Subscription failures never raise: they are
published on the listener error channel tagged with a ListenerContext.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime, timedelta
from typing import Any, Union

from app.infrastructure.firebase._rest_client import (
    DocumentSnapshot,
    FirestoreRESTClient,
    Unsubscribe,
)
from app.infrastructure.firebase.memory_client import InMemoryFirestoreClient
from app.infrastructure.firebase.query import FieldFilter, OrderBy
from app.infrastructure.firebase.timestamps import decode_timestamps, encode_timestamps
from app.infrastructure.messaging.listener_errors import (
    ListenerErrorChannel,
    ListenerErrorEvent,
    get_listener_error_channel,
)
from app.shared.enums import ListenerContext
from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid
from app.shared.utils.unset import strip_unset

logger = logging.getLogger(__name__)

FirestoreClient = Union[FirestoreRESTClient, InMemoryFirestoreClient]
Document = dict[str, Any]
OnChange = Callable[[list[Document]], None]

# Firestore commit limit
BATCH_SIZE = 500


def to_store_data(data: dict[str, Any]) -> dict[str, Any]:
    """Prepare data for writing: drop UNSET at any depth, datetimes to Timestamp."""
    return encode_timestamps(strip_unset(data))


def from_snapshot(snapshot: DocumentSnapshot) -> Document:
    """Snapshot to plain dict with UTC datetimes and the document id under 'id'."""
    data = decode_timestamps(snapshot.to_dict())
    data["id"] = snapshot.id
    return data


class _Subscription:
    """Single live listener; the unsubscribe handle is safe to call more than once."""

    def __init__(self, collection: str, context: ListenerContext) -> None:
        self.collection = collection
        self.context = context
        self._release: Unsubscribe | None = None
        self.closed = False

    def attach(self, release: Unsubscribe) -> None:
        self._release = release

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        if self._release is not None:
            self._release()
            self._release = None
        logger.debug("Subscription on %s closed", self.collection)


class DocumentStore:
    """Generic document operations keyed by collection name and document id."""

    def __init__(
        self,
        client: FirestoreClient,
        error_channel: ListenerErrorChannel | None = None,
    ) -> None:
        self._client = client
        self._error_channel = error_channel
        self._last_timestamp: datetime | None = None

    def next_timestamp(self) -> datetime:
        """Current UTC time, strictly later than any timestamp this store issued before.

        Every repository sharing the store draws createdAt/updatedAt from here, so
        an update always sorts after the write it follows.
        """
        now = utc_now()
        if self._last_timestamp is not None and now <= self._last_timestamp:
            now = self._last_timestamp + timedelta(microseconds=1)
        self._last_timestamp = now
        return now

    @property
    def client(self) -> FirestoreClient:
        return self._client

    @property
    def error_channel(self) -> ListenerErrorChannel:
        return self._error_channel or get_listener_error_channel()

    def _query(
        self,
        collection: str,
        filters: Iterable[FieldFilter] = (),
        order_by: Iterable[OrderBy] = (),
        limit: int | None = None,
        start_after: Sequence[Any] = (),
    ):
        query = self._client.collection(collection)
        for f in filters:
            query = query.where(f.field, f.op, encode_timestamps(f.value))
        for o in order_by:
            query = query.order_by(o.field, o.direction)
        if start_after:
            query = query.start_after(*encode_timestamps(list(start_after)))
        if limit:
            query = query.limit(limit)
        return query

    async def get(self, collection: str, document_id: str) -> Document | None:
        """Return the document, or None if it does not exist."""
        snapshot = await self._client.collection(collection).document(document_id).get()
        if snapshot is None:
            return None
        return from_snapshot(snapshot)

    async def list(
        self,
        collection: str,
        filters: Sequence[FieldFilter] = (),
        order_by: Sequence[OrderBy] = (),
        limit: int | None = None,
        start_after: Sequence[Any] = (),
    ) -> list[Document]:
        """Return matching documents in query order.

        ``start_after`` holds one value per order_by clause and resumes after
        that position (an order_by on ``__name__`` takes a document id).
        """
        query = self._query(collection, filters, order_by, limit, start_after)
        return [from_snapshot(s) async for s in query.stream()]

    async def create(
        self,
        collection: str,
        document_id: str | None,
        data: dict[str, Any],
    ) -> str:
        """Write a new document and return its id (a new CUID when document_id is None).

        Raises DocumentExistsError when a document with that id already exists.
        """
        doc_id = document_id or generate_cuid()
        await self._client.collection(collection).create(doc_id, to_store_data(data))
        return doc_id

    async def update(self, collection: str, document_id: str, data: dict[str, Any]) -> None:
        """Merge top-level fields; raises DocumentNotFoundError if the document is missing."""
        payload = to_store_data(data)
        if not payload:
            return
        await self._client.collection(collection).document(document_id).update(payload)

    async def delete(self, collection: str, document_id: str) -> None:
        """Delete a single document (no cascade; missing documents are ignored)."""
        await self._client.collection(collection).document(document_id).delete()

    async def count(self, collection: str) -> int:
        query = self._client.collection(collection)
        return len(await query.get())

    async def delete_all(self, collection: str) -> int:
        """Delete every document in a collection in commits of BATCH_SIZE; returns count."""
        snapshots = await self._client.collection(collection).get()
        for start in range(0, len(snapshots), BATCH_SIZE):
            chunk = snapshots[start:start + BATCH_SIZE]
            await self._client.batch_write(
                [{"path": f"{collection}/{s.id}", "delete": True} for s in chunk]
            )
        return len(snapshots)

    async def write_many(self, collection: str, documents: Sequence[tuple[str, dict[str, Any]]]) -> int:
        """Full-set (id, data) pairs in commits of BATCH_SIZE; returns count."""
        for start in range(0, len(documents), BATCH_SIZE):
            chunk = documents[start:start + BATCH_SIZE]
            await self._client.batch_write(
                [{"path": f"{collection}/{doc_id}", "data": to_store_data(data)} for doc_id, data in chunk]
            )
        return len(documents)

    def subscribe(
        self,
        collection: str,
        on_change: OnChange,
        *,
        context: ListenerContext,
        filters: Sequence[FieldFilter] = (),
        order_by: Sequence[OrderBy] = (),
    ) -> Unsubscribe:
        """Listen to a query; on_change receives the whole ordered result set on every change.

        Never raises for listener failures: those are published on the error
        channel with the given context. Must be called from a running event loop.
        """
        subscription = _Subscription(collection, context)

        def handle_snapshot(snapshots: list[DocumentSnapshot]) -> None:
            if subscription.closed:
                return
            on_change([from_snapshot(s) for s in snapshots])

        def handle_error(exc: Exception) -> None:
            if subscription.closed:
                return
            logger.error("Listener on %s failed: %s", collection, exc)
            self.error_channel.publish(ListenerErrorEvent.from_exception(context, exc))

        try:
            query = self._query(collection, filters, order_by)
            subscription.attach(query.on_snapshot(handle_snapshot, handle_error))
        except Exception as exc:
            handle_error(exc)
        else:
            logger.debug("Subscription on %s opened", collection)
        return subscription.close
