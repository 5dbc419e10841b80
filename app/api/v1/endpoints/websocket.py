"""WebSocket endpoint: live mirror of one collection.

/ws/{collection}?tenant_id=... opens a live store for the collection and
pushes a snapshot frame after every store change, or an error frame when
the store's listener fails. The store is deactivated on disconnect.
"""

import asyncio
import logging
from typing import Any

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import BaseModel, ValidationError

from app.api.v1.dependencies import LIVE_COLLECTIONS, build_live_store
from app.application.stores import LiveStore
from app.infrastructure.firebase import get_document_store
from app.schemas.category import CategoryResponse
from app.schemas.service import ServiceResponse
from app.schemas.service_request import ServiceRequestResponse
from app.schemas.tenant import TenantResponse
from app.schemas.websocket import ErrorFrame, SnapshotFrame
from app.shared.enums import StoreState

logger = logging.getLogger(__name__)

router = APIRouter()

_ITEM_SCHEMAS: dict[str, type[BaseModel]] = {
    "tenants": TenantResponse,
    "categories": CategoryResponse,
    "services": ServiceResponse,
    "requests": ServiceRequestResponse,
}


async def _reject_websocket(websocket: WebSocket, reason: str, code: int = 1008) -> None:
    """Accept then immediately close with code/reason so client gets a proper close frame."""
    await websocket.accept()
    await websocket.close(code=code, reason=reason)


def _frame(collection: str, store: LiveStore) -> dict[str, Any] | None:
    if store.state == StoreState.ERROR:
        return ErrorFrame(collection=collection, message=store.error or "").model_dump()
    if store.state != StoreState.READY:
        return None
    schema = _ITEM_SCHEMAS[collection]
    items = []
    for item in store.items:
        try:
            items.append(schema.model_validate(item).model_dump(mode="json"))
        except ValidationError as exc:
            logger.warning("Dropping %s item %s from snapshot: %s", collection, getattr(item, "id", None), exc)
    return SnapshotFrame(collection=collection, items=items).model_dump()


async def _pump(websocket: WebSocket, queue: asyncio.Queue[dict[str, Any]]) -> None:
    while True:
        await websocket.send_json(await queue.get())


@router.websocket("/ws/{collection}")
async def websocket_endpoint(websocket: WebSocket, collection: str):
    """Stream a collection. Unknown collections close with 1008; no store closes with 1011."""
    if collection not in LIVE_COLLECTIONS:
        await _reject_websocket(websocket, f"Unknown collection: {collection}")
        return
    document_store = get_document_store()
    if document_store is None:
        await _reject_websocket(websocket, "Document store not configured", code=1011)
        return

    queue: asyncio.Queue[dict[str, Any]] = asyncio.Queue()

    def on_change(store: LiveStore) -> None:
        frame = _frame(collection, store)
        if frame is not None:
            queue.put_nowait(frame)

    manager = websocket.app.state.ws_manager
    store = build_live_store(
        document_store,
        collection,
        tenant_id=websocket.query_params.get("tenant_id") or None,
        on_change=on_change,
    )
    await manager.connect(websocket, store)
    sender = asyncio.create_task(_pump(websocket, queue))
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.debug("Client left /ws/%s", collection)
    finally:
        sender.cancel()
        await manager.disconnect(websocket)
