"""Thin Firestore REST API client (no firebase-admin).

Uses google-auth for service account tokens and Firestore REST v1.
Keeps the deployment small (avoids grpcio / firebase-admin).
All HTTP calls use httpx.AsyncClient so they do not block the event loop.

The REST API has no push channel, so Query.on_snapshot() polls runQuery
and delivers a snapshot only when the result set changed.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import AsyncIterator, Callable
from typing import Any
from urllib.parse import quote

import httpx

from app.infrastructure.exceptions import (
    DocumentExistsError,
    DocumentNotFoundError,
    FirestoreAPIError,
    PermissionDeniedError,
    ResourceExhaustedError,
    UnauthenticatedError,
    UnavailableError,
)
from app.infrastructure.firebase._rest_encoding import (
    _encode_value,
    decode_document,
    document_id,
    encode_document,
)
from app.infrastructure.firebase.query import (
    ASCENDING,
    DOCUMENT_ID,
    OP_MAP,
    FieldFilter,
    OrderBy,
)

logger = logging.getLogger(__name__)

_FIRESTORE_SCOPE = "https://www.googleapis.com/auth/datastore"
_BASE = "https://firestore.googleapis.com/v1"

SnapshotCallback = Callable[[list["DocumentSnapshot"]], None]
ErrorCallback = Callable[[Exception], None]
Unsubscribe = Callable[[], None]


def _get_credentials(key_dict: dict):
    """Return google.oauth2.service_account.Credentials for Firestore."""
    from google.oauth2 import service_account

    return service_account.Credentials.from_service_account_info(
        key_dict, scopes=[_FIRESTORE_SCOPE]
    )


def _get_access_token(credentials) -> str:
    from google.auth.transport.requests import Request

    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


def _error_message(resp: httpx.Response) -> str:
    """Firestore error body is {'error': {'message': ...}}; fall back to the reason phrase."""
    try:
        body = resp.json()
    except ValueError:
        return resp.reason_phrase or f"HTTP {resp.status_code}"
    if isinstance(body, list) and body:
        body = body[0]
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return resp.reason_phrase or f"HTTP {resp.status_code}"


def _raise_for_status(resp: httpx.Response, path: str) -> None:
    """Map Firestore HTTP errors to FirestoreAPIError subclasses carrying a Firestore code."""
    status = resp.status_code
    if status < 400:
        return
    message = _error_message(resp)
    if status == 401:
        raise UnauthenticatedError(message)
    if status == 403:
        raise PermissionDeniedError(message)
    if status == 404:
        raise DocumentNotFoundError(path)
    if status == 409:
        raise DocumentExistsError(path)
    if status == 429:
        raise ResourceExhaustedError(message)
    if status >= 500:
        raise UnavailableError(message)
    raise FirestoreAPIError(message, code="invalid-argument" if status == 400 else "unknown")


async def _request_async(
    client: httpx.AsyncClient,
    url: str,
    method: str = "GET",
    body: dict | None = None,
    access_token: str | None = None,
    *,
    path: str = "",
    missing_ok: bool = False,
) -> Any:
    """Perform async HTTP request to Firestore REST API.

    With missing_ok, 404 returns None instead of raising DocumentNotFoundError.
    """
    headers = {"Content-Type": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    try:
        resp = await client.request(method, url, headers=headers, json=body)
    except httpx.TransportError as e:
        raise UnavailableError(str(e) or e.__class__.__name__) from e
    if resp.status_code == 404 and missing_ok:
        return None
    _raise_for_status(resp, path)
    raw = resp.content
    return json.loads(raw.decode()) if raw else {}


def _quote_field_path(field: str) -> str:
    """Backtick-quote a field name that is not a simple identifier."""
    if field.replace("_", "a").isalnum() and not field[0].isdigit():
        return field
    return "`" + field.replace("\\", "\\\\").replace("`", "\\`") + "`"


class DocumentSnapshot:
    """Snapshot of a document (id + data)."""

    def __init__(self, id_: str, data: dict):
        self.id = id_
        self._data = data

    def to_dict(self) -> dict:
        return self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DocumentSnapshot):
            return NotImplemented
        return self.id == other.id and self._data == other._data

    def __repr__(self) -> str:
        return f"DocumentSnapshot(id={self.id!r})"


class DocumentReference:
    """Reference to a single document; matches firestore API style."""

    def __init__(self, client: FirestoreRESTClient, path: str):
        self._client = client
        self._path = path

    @property
    def id(self) -> str:
        return self._path.split("/")[-1]

    async def set(self, data: dict[str, Any]) -> None:
        """Create or overwrite the document (PATCH with no mask = full replace)."""
        await _request_async(
            self._client._http,
            f"{_BASE}/{self._path}",
            method="PATCH",
            body=encode_document(data),
            access_token=await self._client.get_token(),
            path=self._path,
        )

    async def update(self, data: dict[str, Any]) -> None:
        """Merge top-level fields into an existing document.

        Raises DocumentNotFoundError when the document does not exist.
        """
        params = [f"updateMask.fieldPaths={quote(_quote_field_path(k), safe='')}" for k in data]
        params.append("currentDocument.exists=true")
        await _request_async(
            self._client._http,
            f"{_BASE}/{self._path}?{'&'.join(params)}",
            method="PATCH",
            body=encode_document(data),
            access_token=await self._client.get_token(),
            path=self._path,
        )

    async def get(self) -> DocumentSnapshot | None:
        """Fetch the document; returns None if not found."""
        out = await _request_async(
            self._client._http,
            f"{_BASE}/{self._path}",
            access_token=await self._client.get_token(),
            path=self._path,
            missing_ok=True,
        )
        if out is None:
            return None
        return DocumentSnapshot(self.id, decode_document(out))

    async def delete(self) -> None:
        """Delete the document. Idempotent if document is already missing."""
        await _request_async(
            self._client._http,
            f"{_BASE}/{self._path}",
            method="DELETE",
            access_token=await self._client.get_token(),
            path=self._path,
            missing_ok=True,
        )


class _PollingListener:
    """Re-runs a query on an interval and reports changed result sets.

    Like a Firestore listener, it stops for good after the first error.
    """

    def __init__(
        self,
        query: Query,
        callback: SnapshotCallback,
        on_error: ErrorCallback,
        interval: float,
    ) -> None:
        self._query = query
        self._callback = callback
        self._on_error = on_error
        self._interval = interval
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def _run(self) -> None:
        last: list[DocumentSnapshot] | None = None
        while True:
            try:
                docs = await self._query.get()
                if docs != last:
                    last = docs
                    self._callback(docs)
            except asyncio.CancelledError:
                raise
            except Exception as exc:
                logger.warning("Firestore listener on %s failed: %s", self._query.collection_id, exc)
                self._on_error(exc)
                return
            await asyncio.sleep(self._interval)

    def unsubscribe(self) -> None:
        self._task.cancel()


class Query:
    """Fluent query builder for a collection; runs via runQuery (filter/order/limit on server)."""

    def __init__(
        self,
        client: FirestoreRESTClient,
        parent: str,
        collection_id: str,
        filters: tuple[FieldFilter, ...] = (),
        orders: tuple[OrderBy, ...] = (),
        limit: int | None = None,
        offset: int = 0,
        cursor: tuple[Any, ...] = (),
    ):
        self._client = client
        self._parent = parent
        self.collection_id = collection_id
        self._filters = filters
        self._orders = orders
        self._limit = limit
        self._offset = offset
        self._cursor = cursor

    def _copy(self, **changes: Any) -> Query:
        state = {
            "filters": self._filters,
            "orders": self._orders,
            "limit": self._limit,
            "offset": self._offset,
            "cursor": self._cursor,
        }
        state.update(changes)
        return Query(self._client, self._parent, self.collection_id, **state)

    def where(self, field: str, op: str, value: Any) -> Query:
        return self._copy(filters=(*self._filters, FieldFilter(field, op, value)))

    def order_by(self, field: str, direction: str = ASCENDING) -> Query:
        return self._copy(orders=(*self._orders, OrderBy(field, direction)))  # type: ignore[arg-type]

    def limit(self, n: int) -> Query:
        return self._copy(limit=n)

    def offset(self, n: int) -> Query:
        return self._copy(offset=n)

    def start_after(self, *values: Any) -> Query:
        """Resume after the row whose order_by values are ``values``; __name__ takes a document id."""
        return self._copy(cursor=values)

    def _cursor_value(self, order: OrderBy, value: Any) -> dict[str, Any]:
        if order.field == DOCUMENT_ID:
            return {"referenceValue": f"{self._parent}/{self.collection_id}/{value}"}
        return _encode_value(value)

    def _structured_query(self) -> dict[str, Any]:
        structured: dict[str, Any] = {"from": [{"collectionId": self.collection_id}]}
        field_filters = [
            {
                "fieldFilter": {
                    "field": {"fieldPath": f.field},
                    "op": OP_MAP[f.op],
                    "value": _encode_value(f.value),
                }
            }
            for f in self._filters
        ]
        if len(field_filters) == 1:
            structured["where"] = field_filters[0]
        elif field_filters:
            structured["where"] = {"compositeFilter": {"op": "AND", "filters": field_filters}}
        if self._orders:
            structured["orderBy"] = [
                {"field": {"fieldPath": o.field}, "direction": o.direction}
                for o in self._orders
            ]
        if self._cursor:
            structured["startAt"] = {
                "values": [self._cursor_value(o, v) for o, v in zip(self._orders, self._cursor)],
                "before": False,
            }
        if self._offset:
            structured["offset"] = self._offset
        if self._limit:
            structured["limit"] = self._limit
        return structured

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """Execute the query and yield document snapshots."""
        resp = await _request_async(
            self._client._http,
            f"{_BASE}/{self._parent}:runQuery",
            method="POST",
            body={"structuredQuery": self._structured_query()},
            access_token=await self._client.get_token(),
            path=f"{self._parent}/{self.collection_id}",
        )
        items = resp if isinstance(resp, list) else ([resp] if resp else [])
        for item in items:
            if "document" not in item:
                continue
            doc = item["document"]
            yield DocumentSnapshot(document_id(doc), decode_document(doc))

    async def get(self) -> list[DocumentSnapshot]:
        return [snapshot async for snapshot in self.stream()]

    def on_snapshot(self, callback: SnapshotCallback, on_error: ErrorCallback) -> Unsubscribe:
        """Listen for result-set changes. Must be called from a running event loop."""
        listener = _PollingListener(self, callback, on_error, self._client.poll_interval)
        return listener.unsubscribe


class CollectionReference(Query):
    """Reference to a collection; matches firestore API style."""

    def __init__(self, client: FirestoreRESTClient, path: str):
        self._path = path.rstrip("/")
        parent, collection_id = self._path.rsplit("/", 1)
        super().__init__(client, parent, collection_id)

    def document(self, document_id: str) -> DocumentReference:
        return DocumentReference(self._client, f"{self._path}/{document_id}")

    async def create(self, document_id: str, data: dict[str, Any]) -> None:
        """Create a document with the given ID (fail with DocumentExistsError if it exists)."""
        url = f"{_BASE}/{self._path}?documentId={quote(document_id, safe='')}"
        await _request_async(
            self._client._http,
            url,
            method="POST",
            body=encode_document(data),
            access_token=await self._client.get_token(),
            path=f"{self._path}/{document_id}",
        )


class FirestoreRESTClient:
    """Lightweight Firestore client using REST API (no firebase-admin)."""

    def __init__(
        self,
        project_id: str,
        credentials,
        *,
        http_client: httpx.AsyncClient | None = None,
        poll_interval: float = 2.0,
        timeout: float = 30.0,
    ) -> None:
        self._project_id = project_id
        self._credentials = credentials
        self._database = f"projects/{project_id}/databases/(default)"
        self._prefix = f"{self._database}/documents"
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        self._owns_http = http_client is None
        self.poll_interval = poll_interval

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def get_token(self) -> str | None:
        """Return a valid access token; refreshes in thread pool to avoid blocking."""
        if self._credentials is None:
            return None
        return await asyncio.to_thread(_get_access_token, self._credentials)

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(self, f"{self._prefix}/{collection_id}")

    async def batch_write(self, writes: list[dict[str, Any]]) -> None:
        """Commit writes atomically (max 500 per call, as enforced by Firestore).

        Each write is {'path': 'collection/id', 'data': {...}} for a full set,
        or {'path': ..., 'delete': True}.
        """
        if not writes:
            return
        body_writes: list[dict[str, Any]] = []
        for w in writes:
            name = f"{self._prefix}/{w['path']}"
            if w.get("delete"):
                body_writes.append({"delete": name})
            else:
                body_writes.append({"update": {"name": name, **encode_document(w["data"])}})
        await _request_async(
            self._http,
            f"{_BASE}/{self._prefix}:commit",
            method="POST",
            body={"writes": body_writes},
            access_token=await self.get_token(),
            path=self._prefix,
        )
