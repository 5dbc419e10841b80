"""WebSocket connection manager.

Each connection owns one activated live store. The manager pairs the two so
a disconnect (or app shutdown) always deactivates the store exactly once.
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import WebSocket

from app.application.stores import LiveStore

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Tracks open WebSocket connections and the live store feeding each.

    - connect accepts the socket, then activates its store.
    - disconnect and close_all deactivate; both are safe to repeat.
    """

    def __init__(self) -> None:
        self._stores: dict[WebSocket, LiveStore] = {}
        self._lock = asyncio.Lock()

    async def connect(self, websocket: WebSocket, store: LiveStore) -> None:
        """Accept the connection and start the store's subscription."""
        await websocket.accept()
        async with self._lock:
            self._stores[websocket] = store
        store.activate()
        logger.debug("WebSocket connected for %s", store.entity_label)

    async def disconnect(self, websocket: WebSocket) -> None:
        async with self._lock:
            store = self._stores.pop(websocket, None)
        if store is not None:
            store.deactivate()
            logger.debug("WebSocket disconnected for %s", store.entity_label)

    async def close_all(self) -> None:
        """Deactivate every store (app shutdown). Sockets are closed by the server."""
        async with self._lock:
            stores, self._stores = list(self._stores.values()), {}
        for store in stores:
            store.deactivate()
        if stores:
            logger.info("Deactivated %d live stores", len(stores))

    async def get_connection_count(self) -> int:
        async with self._lock:
            return len(self._stores)
