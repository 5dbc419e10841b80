"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the document store, repositories and
application use cases. Routes depend only on these, never on the
infrastructure modules directly. Authentication is not enforced.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated

from fastapi import Depends

from app.application.interfaces import (
    ICategoryRepository,
    IListenerErrorChannel,
    IServiceRepository,
    IServiceRequestRepository,
    ITenantRepository,
)
from app.application.stores import (
    CategoriesStore,
    LiveStore,
    RequestsStore,
    ServicesStore,
    TenantsStore,
)
from app.application.use_cases import GetDashboardStatsUseCase, GuestPortalService
from app.core.config import Settings, get_settings
from app.domain.exceptions import StoreNotConfiguredException
from app.infrastructure.firebase import DocumentStore, get_document_store
from app.infrastructure.firebase.repositories import (
    FirestoreCategoryRepository,
    FirestoreServiceRepository,
    FirestoreServiceRequestRepository,
    FirestoreTenantRepository,
)
from app.infrastructure.firebase.services import FirestoreSeedService
from app.shared.enums import ListenerContext


def get_store() -> DocumentStore:
    """Shared DocumentStore; 503 (SERVICE_UNAVAILABLE) when it was never initialized."""
    store = get_document_store()
    if store is None:
        raise StoreNotConfiguredException()
    return store


StoreDep = Annotated[DocumentStore, Depends(get_store)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_listener_errors(store: StoreDep) -> IListenerErrorChannel:
    return store.error_channel


def get_tenant_repo(store: StoreDep) -> ITenantRepository:
    return FirestoreTenantRepository(store)


def get_category_repo(store: StoreDep) -> ICategoryRepository:
    return FirestoreCategoryRepository(store)


def get_service_repo(store: StoreDep) -> IServiceRepository:
    return FirestoreServiceRepository(store)


def get_request_repo(store: StoreDep) -> IServiceRequestRepository:
    return FirestoreServiceRequestRepository(store)


TenantRepoDep = Annotated[ITenantRepository, Depends(get_tenant_repo)]
CategoryRepoDep = Annotated[ICategoryRepository, Depends(get_category_repo)]
ServiceRepoDep = Annotated[IServiceRepository, Depends(get_service_repo)]
RequestRepoDep = Annotated[IServiceRequestRepository, Depends(get_request_repo)]
ListenerErrorsDep = Annotated[IListenerErrorChannel, Depends(get_listener_errors)]


def get_guest_portal_service(
    tenants: TenantRepoDep,
    services: ServiceRepoDep,
    categories: CategoryRepoDep,
    requests: RequestRepoDep,
) -> GuestPortalService:
    """Build GuestPortalService from the four collection repositories."""
    return GuestPortalService(tenants, services, categories, requests)


def get_dashboard_use_case(requests: RequestRepoDep) -> GetDashboardStatsUseCase:
    return GetDashboardStatsUseCase(requests)


def get_seed_service(store: StoreDep, settings: SettingsDep) -> FirestoreSeedService:
    return FirestoreSeedService(store, settings)


GuestPortalDep = Annotated[GuestPortalService, Depends(get_guest_portal_service)]
DashboardDep = Annotated[GetDashboardStatsUseCase, Depends(get_dashboard_use_case)]
SeedServiceDep = Annotated[FirestoreSeedService, Depends(get_seed_service)]


LIVE_COLLECTIONS = ListenerContext.values()


def build_live_store(
    store: DocumentStore,
    collection: str,
    *,
    tenant_id: str | None = None,
    on_change: Callable[[LiveStore], None] | None = None,
) -> LiveStore:
    """Live store for a collection name; tenant_id scopes services and requests.

    Raises ValueError for a collection without a live store.
    """
    channel = store.error_channel
    match ListenerContext(collection):
        case ListenerContext.TENANTS:
            return TenantsStore(FirestoreTenantRepository(store), channel, on_change=on_change)
        case ListenerContext.CATEGORIES:
            return CategoriesStore(FirestoreCategoryRepository(store), channel, on_change=on_change)
        case ListenerContext.SERVICES:
            return ServicesStore(
                FirestoreServiceRepository(store), channel, tenant_id=tenant_id, on_change=on_change
            )
        case ListenerContext.REQUESTS:
            return RequestsStore(
                FirestoreServiceRequestRepository(store), channel, tenant_id=tenant_id, on_change=on_change
            )
