"""Live store of guest service requests, optionally scoped to one tenant."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from app.application.interfaces import (
    IListenerErrorChannel,
    IServiceRequestRepository,
    Unsubscribe,
)
from app.application.stores.base import LiveStore
from app.domain.entities import ServiceRequest
from app.domain.enums import RequestStatus
from app.shared.enums import ListenerContext


class RequestsStore(LiveStore[ServiceRequest]):
    """Requests newest first. Requests are created and re-statused, never deleted."""

    context = ListenerContext.REQUESTS
    entity_label = "requests"

    _repository: IServiceRequestRepository

    def __init__(
        self,
        repository: IServiceRequestRepository,
        error_channel: IListenerErrorChannel,
        *,
        tenant_id: str | None = None,
        on_change: Callable[[LiveStore[ServiceRequest]], None] | None = None,
    ) -> None:
        super().__init__(repository, error_channel, on_change=on_change)
        self.tenant_id = tenant_id

    def _open(self, on_snapshot: Callable[[list[ServiceRequest]], None]) -> Unsubscribe:
        if self.tenant_id:
            return self._repository.subscribe_by_tenant(self.tenant_id, on_snapshot)
        return self._repository.subscribe_all(on_snapshot)

    def get_by_tenant_id(self, tenant_id: str) -> list[ServiceRequest]:
        table: dict[Any, list[ServiceRequest]] = self._index("tenant", lambda r: r.tenant_id, many=True)
        return list(table.get(tenant_id, []))

    async def add(self, request: ServiceRequest) -> ServiceRequest:
        return await self._write(self._repository.create(request))

    async def update_status(self, request_id: str, status: RequestStatus) -> None:
        await self._write(self._repository.update_status(request_id, status))
