"""Live store of the global service categories."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from app.application.interfaces import ICategoryRepository, Unsubscribe
from app.application.stores.base import MutableLiveStore
from app.domain.entities import Service, ServiceCategory
from app.shared.enums import ListenerContext


def categories_in_use(
    categories: Iterable[ServiceCategory], services: Iterable[Service]
) -> list[ServiceCategory]:
    """Categories referenced by at least one of the services, by category order."""
    used = {s.category_id for s in services}
    return sorted((c for c in categories if c.id in used), key=lambda c: c.order)


class CategoriesStore(MutableLiveStore[ServiceCategory]):
    context = ListenerContext.CATEGORIES
    entity_label = "categories"

    _repository: ICategoryRepository

    def _open(self, on_snapshot: Callable[[list[ServiceCategory]], None]) -> Unsubscribe:
        return self._repository.subscribe_all(on_snapshot)

    def categories_in_use(self, services: Iterable[Service]) -> list[ServiceCategory]:
        return categories_in_use(self.items, services)
