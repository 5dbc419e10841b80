"""Live store of all tenants."""

from __future__ import annotations

from collections.abc import Callable

from app.application.interfaces import ITenantRepository, Unsubscribe
from app.application.stores.base import MutableLiveStore
from app.domain.entities import Tenant
from app.shared.enums import ListenerContext


class TenantsStore(MutableLiveStore[Tenant]):
    context = ListenerContext.TENANTS
    entity_label = "tenants"

    _repository: ITenantRepository

    def _open(self, on_snapshot: Callable[[list[Tenant]], None]) -> Unsubscribe:
        return self._repository.subscribe_all(on_snapshot)

    def get_by_slug(self, slug: str) -> Tenant | None:
        """Exact, case-sensitive slug match over the cached list."""
        return self._index("slug", lambda t: t.slug).get(slug)
