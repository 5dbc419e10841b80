"""Pytest configuration and fixtures for stayplus.

Every test runs against the in-memory Firestore client; the environment is
set before app.main is imported so create_app() sees the memory backend.
"""

import asyncio
import os

os.environ["DATABASE_BACKEND"] = "memory"
os.environ["ENVIRONMENT"] = "development"
os.environ["SEED_ON_STARTUP"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.config import get_settings
from app.core.limiter import limiter
from app.domain.entities import (
    Service,
    ServiceCategory,
    ServiceRequest,
    Tenant,
    TenantContact,
)
from app.domain.enums import PricingType
from app.domain.value_objects import I18nText
from app.infrastructure.firebase import DocumentStore, set_document_store
from app.infrastructure.firebase.memory_client import InMemoryFirestoreClient
from app.infrastructure.firebase.repositories import (
    FirestoreCategoryRepository,
    FirestoreServiceRepository,
    FirestoreServiceRequestRepository,
    FirestoreTenantRepository,
)
from app.infrastructure.firebase.services import reset_seed_guard
from app.infrastructure.messaging import ListenerErrorChannel, set_listener_error_channel
from app.main import app


@pytest.fixture(autouse=True)
def _isolate_globals():
    """Fresh settings, channel, seed guard and rate limits per test; no shared store."""
    get_settings.cache_clear()
    set_listener_error_channel(None)
    reset_seed_guard()
    limiter.reset()
    yield
    set_document_store(None)
    get_settings.cache_clear()


@pytest.fixture
def channel() -> ListenerErrorChannel:
    return ListenerErrorChannel()


@pytest.fixture
def memory_client() -> InMemoryFirestoreClient:
    return InMemoryFirestoreClient()


@pytest.fixture
def store(memory_client: InMemoryFirestoreClient, channel: ListenerErrorChannel) -> DocumentStore:
    """DocumentStore over an empty in-memory client, installed as the app's store."""
    document_store = DocumentStore(memory_client, channel)
    set_document_store(document_store)
    return document_store


@pytest.fixture
def settle():
    """Let pending listener deliveries (scheduled on the loop) run."""

    async def _settle(rounds: int = 3) -> None:
        for _ in range(rounds):
            await asyncio.sleep(0)

    return _settle


@pytest.fixture
def tenant_repo(store: DocumentStore) -> FirestoreTenantRepository:
    return FirestoreTenantRepository(store)


@pytest.fixture
def category_repo(store: DocumentStore) -> FirestoreCategoryRepository:
    return FirestoreCategoryRepository(store)


@pytest.fixture
def service_repo(store: DocumentStore) -> FirestoreServiceRepository:
    return FirestoreServiceRepository(store)


@pytest.fixture
def request_repo(store: DocumentStore) -> FirestoreServiceRequestRepository:
    return FirestoreServiceRequestRepository(store)


@pytest.fixture
async def client(store: DocumentStore) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) backed by the memory store."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def make_tenant(slug: str = "acme", **overrides) -> Tenant:
    fields = {
        "id": "",
        "slug": slug,
        "name": f"{slug.title()} Lodge",
        "contact": TenantContact(email=f"host@{slug}.test"),
    }
    fields.update(overrides)
    return Tenant(**fields)


def make_category(category_id: str = "transport", order: int = 0, **overrides) -> ServiceCategory:
    fields = {
        "id": category_id,
        "name": I18nText(category_id.title(), category_id.title()),
        "icon": "car",
        "order": order,
    }
    fields.update(overrides)
    return ServiceCategory(**fields)


def make_service(tenant_id: str, category_id: str = "transport", **overrides) -> Service:
    fields = {
        "id": "",
        "tenant_id": tenant_id,
        "category_id": category_id,
        "name": I18nText("Airport Transfer", "Aerodromski Transfer"),
        "description": I18nText("Pickup", "Prevoz"),
        "pricing_type": PricingType.FIXED,
        "price": 25.0,
    }
    fields.update(overrides)
    return Service(**fields)


def make_request(tenant_id: str, service_id: str = "svc-1", **overrides) -> ServiceRequest:
    fields = {
        "id": "",
        "tenant_id": tenant_id,
        "service_id": service_id,
        "service_name": I18nText("Airport Transfer", "Aerodromski Transfer"),
        "category_id": "transport",
        "guest_name": "Ana",
    }
    fields.update(overrides)
    return ServiceRequest(**fields)


@pytest.fixture
def factories():
    """Entity builders with sensible defaults (override any field by keyword)."""

    class _Factories:
        tenant = staticmethod(make_tenant)
        category = staticmethod(make_category)
        service = staticmethod(make_service)
        request = staticmethod(make_request)

    return _Factories
