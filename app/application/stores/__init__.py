"""Live stores: per-entity reactive caches over repository subscriptions."""

from app.application.stores.base import LiveStore, MutableLiveStore, listener_error_message
from app.application.stores.categories import CategoriesStore, categories_in_use
from app.application.stores.requests import RequestsStore
from app.application.stores.services import ServicesStore
from app.application.stores.tenants import TenantsStore

__all__ = [
    "CategoriesStore",
    "LiveStore",
    "MutableLiveStore",
    "RequestsStore",
    "ServicesStore",
    "TenantsStore",
    "categories_in_use",
    "listener_error_message",
]
