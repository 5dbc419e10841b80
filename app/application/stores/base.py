"""Live stores: in-memory mirrors of a collection kept current by a subscription.

A store is activated once (opening one subscription and one error-channel
registration) and deactivated once. Every snapshot replaces ``items`` with a
new list; derived lookups are rebuilt only when that list object changes.
Writes go to the repository and are never applied to ``items`` directly: the
cache changes only when the next snapshot arrives.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Hashable
from typing import Any, Self

from app.application.interfaces import IListenerError, IListenerErrorChannel, Unsubscribe
from app.core.constants import LOAD_FAILED_MESSAGE, PERMISSION_DENIED_MESSAGE
from app.shared.enums import ListenerContext, StoreState

logger = logging.getLogger(__name__)

PERMISSION_DENIED = "permission-denied"


def listener_error_message(event: IListenerError, entity_label: str) -> str:
    """User-facing text for a listener failure."""
    if event.code == PERMISSION_DENIED:
        return PERMISSION_DENIED_MESSAGE
    return event.message or LOAD_FAILED_MESSAGE.format(entity=entity_label)


class LiveStore[EntityT]:
    """Reactive cache for one entity type.

    Subclasses set ``context`` and ``entity_label`` and implement ``_open``,
    which starts the repository subscription.
    """

    context: ListenerContext
    entity_label: str

    def __init__(
        self,
        repository: Any,
        error_channel: IListenerErrorChannel,
        *,
        on_change: Callable[[LiveStore[EntityT]], None] | None = None,
    ) -> None:
        self._repository = repository
        self._error_channel = error_channel
        self._on_change = on_change
        self.items: list[EntityT] = []
        self.error: str | None = None
        self.is_loading = False
        self.state = StoreState.IDLE
        self._active = False
        self._unsubscribe: Unsubscribe | None = None
        self._unsubscribe_errors: Unsubscribe | None = None
        self._indexes: dict[str, tuple[list[EntityT], dict[Hashable, Any]]] = {}

    @property
    def active(self) -> bool:
        return self._active

    def _open(self, on_snapshot: Callable[[list[EntityT]], None]) -> Unsubscribe:
        raise NotImplementedError

    def activate(self) -> None:
        """Start loading: register on the error channel, then subscribe. No-op when active."""
        if self.active:
            return
        self.state = StoreState.LOADING
        self.is_loading = True
        self.error = None
        self._active = True
        self._unsubscribe_errors = self._error_channel.subscribe(self._handle_error_event)
        self._unsubscribe = self._open(self._handle_snapshot)
        logger.debug("%s store activated", self.entity_label)
        self._notify()

    def deactivate(self) -> None:
        """Release the subscription and the channel registration exactly once."""
        if not self.active:
            return
        self._active = False
        unsubscribe, self._unsubscribe = self._unsubscribe, None
        unsubscribe_errors, self._unsubscribe_errors = self._unsubscribe_errors, None
        if unsubscribe is not None:
            unsubscribe()
        if unsubscribe_errors is not None:
            unsubscribe_errors()
        self.state = StoreState.IDLE
        self.is_loading = False
        logger.debug("%s store deactivated", self.entity_label)

    async def __aenter__(self) -> Self:
        self.activate()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.deactivate()

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self)

    def _handle_snapshot(self, items: list[EntityT]) -> None:
        if not self.active:
            return
        self.items = list(items)
        self.is_loading = False
        self.error = None
        self.state = StoreState.READY
        self._notify()

    def _handle_error_event(self, event: IListenerError) -> None:
        if not self.active or event.context != self.context:
            return
        self.error = listener_error_message(event, self.entity_label)
        self.is_loading = False
        self.state = StoreState.ERROR
        logger.warning("%s store error: %s", self.entity_label, self.error)
        self._notify()

    def _index(self, name: str, key: Callable[[EntityT], Hashable], *, many: bool = False) -> dict[Hashable, Any]:
        """Lookup table over the current items, cached until ``items`` is replaced."""
        cached = self._indexes.get(name)
        if cached is not None and cached[0] is self.items:
            return cached[1]
        table: dict[Hashable, Any] = {}
        for item in self.items:
            if many:
                table.setdefault(key(item), []).append(item)
            else:
                table.setdefault(key(item), item)
        self._indexes[name] = (self.items, table)
        return table

    def get_by_id(self, entity_id: str) -> EntityT | None:
        return self._index("id", lambda item: item.id).get(entity_id)

    async def _write[R](self, operation: Awaitable[R]) -> R:
        """Await a repository write; on failure record the message and re-raise."""
        try:
            return await operation
        except Exception as exc:
            self.error = str(exc)
            logger.warning("%s store write failed: %s", self.entity_label, exc)
            self._notify()
            raise


class MutableLiveStore[EntityT](LiveStore[EntityT]):
    """Live store with add/update/delete passed through to the repository."""

    async def add(self, entity: EntityT) -> EntityT:
        return await self._write(self._repository.create(entity))

    async def update(self, entity_id: str, patch: dict[str, Any]) -> None:
        await self._write(self._repository.update(entity_id, patch))

    async def delete(self, entity_id: str) -> None:
        await self._write(self._repository.delete(entity_id))
