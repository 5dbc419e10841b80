"""Live store of services, optionally scoped to one tenant."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from app.application.interfaces import IListenerErrorChannel, IServiceRepository, Unsubscribe
from app.application.stores.base import LiveStore, MutableLiveStore
from app.domain.entities import Service
from app.shared.enums import ListenerContext


class ServicesStore(MutableLiveStore[Service]):
    """All services, or only tenant_id's services when given (ordered by display order)."""

    context = ListenerContext.SERVICES
    entity_label = "services"

    _repository: IServiceRepository

    def __init__(
        self,
        repository: IServiceRepository,
        error_channel: IListenerErrorChannel,
        *,
        tenant_id: str | None = None,
        on_change: Callable[[LiveStore[Service]], None] | None = None,
    ) -> None:
        super().__init__(repository, error_channel, on_change=on_change)
        self.tenant_id = tenant_id

    def _open(self, on_snapshot: Callable[[list[Service]], None]) -> Unsubscribe:
        if self.tenant_id:
            return self._repository.subscribe_by_tenant(self.tenant_id, on_snapshot)
        return self._repository.subscribe_all(on_snapshot)

    def get_by_tenant_id(self, tenant_id: str) -> list[Service]:
        """Services whose tenant_id equals tenant_id; never another tenant's."""
        table: dict[Any, list[Service]] = self._index("tenant", lambda s: s.tenant_id, many=True)
        return list(table.get(tenant_id, []))
