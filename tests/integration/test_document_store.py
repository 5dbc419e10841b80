"""Tests for DocumentStore over the in-memory client."""

from datetime import UTC, datetime

import pytest

from app.domain.enums import RequestStatus
from app.infrastructure.exceptions import DocumentExistsError, DocumentNotFoundError
from app.infrastructure.firebase import DocumentStore, FieldFilter, OrderBy
from app.infrastructure.firebase.document_store import BATCH_SIZE
from app.infrastructure.firebase.memory_client import InMemoryFirestoreClient
from app.infrastructure.firebase.timestamps import Timestamp
from app.infrastructure.messaging import ListenerErrorChannel, ListenerErrorEvent
from app.shared.enums import ListenerContext
from app.shared.utils.unset import UNSET


async def test_create_strips_unset_and_returns_id(
    store: DocumentStore, memory_client: InMemoryFirestoreClient
) -> None:
    doc_id = await store.create(
        "tenants", None, {"slug": "acme", "branding": {"logo": UNSET, "primaryColor": "#112233"}}
    )

    assert doc_id
    raw = (await memory_client.collection("tenants").document(doc_id).get()).to_dict()
    assert raw == {"slug": "acme", "branding": {"primaryColor": "#112233"}}


async def test_create_with_existing_id_fails(store: DocumentStore) -> None:
    await store.create("categories", "transport", {"order": 0})
    with pytest.raises(DocumentExistsError):
        await store.create("categories", "transport", {"order": 1})


async def test_timestamps_round_trip_as_utc_datetimes(
    store: DocumentStore, memory_client: InMemoryFirestoreClient
) -> None:
    created = datetime(2024, 6, 1, 9, 0, tzinfo=UTC)
    await store.create("requests", "r1", {"createdAt": created})

    raw = (await memory_client.collection("requests").document("r1").get()).to_dict()
    assert isinstance(raw["createdAt"], Timestamp)

    doc = await store.get("requests", "r1")
    assert doc == {"id": "r1", "createdAt": created}


async def test_get_missing_is_none(store: DocumentStore) -> None:
    assert await store.get("tenants", "nope") is None


async def test_update_merges_and_skips_empty_payload(store: DocumentStore) -> None:
    await store.create("tenants", "t1", {"slug": "acme", "active": True})

    await store.update("tenants", "t1", {"active": False, "description": UNSET})
    await store.update("tenants", "missing", {"name": UNSET})

    assert await store.get("tenants", "t1") == {"id": "t1", "slug": "acme", "active": False}
    with pytest.raises(DocumentNotFoundError):
        await store.update("tenants", "missing", {"name": "x"})


async def test_list_with_filters_and_order(store: DocumentStore) -> None:
    await store.create("services", "a", {"tenantId": "t1", "order": 2})
    await store.create("services", "b", {"tenantId": "t1", "order": 1})
    await store.create("services", "c", {"tenantId": "t2", "order": 0})

    docs = await store.list(
        "services", filters=[FieldFilter("tenantId", "==", "t1")], order_by=[OrderBy("order")]
    )

    assert [d["id"] for d in docs] == ["b", "a"]
    assert await store.count("services") == 3


async def test_delete_and_delete_all(store: DocumentStore) -> None:
    await store.write_many("services", [(f"s{i}", {"order": i}) for i in range(BATCH_SIZE + 3)])
    assert await store.count("services") == BATCH_SIZE + 3

    await store.delete("services", "s0")
    await store.delete("services", "s0")

    assert await store.delete_all("services") == BATCH_SIZE + 2
    assert await store.count("services") == 0


async def test_subscribe_delivers_result_sets(store: DocumentStore, settle) -> None:
    received: list[list[dict]] = []
    unsubscribe = store.subscribe(
        "tenants", received.append, context=ListenerContext.TENANTS, order_by=[OrderBy("slug")]
    )
    await settle()
    await store.create("tenants", "t2", {"slug": "beta"})
    await store.create("tenants", "t1", {"slug": "acme"})
    await settle()

    assert received[0] == []
    assert [d["slug"] for d in received[-1]] == ["acme", "beta"]

    unsubscribe()
    unsubscribe()
    count = len(received)
    await store.create("tenants", "t3", {"slug": "gamma"})
    await settle()
    assert len(received) == count


async def test_subscribe_failure_published_with_context(
    store: DocumentStore,
    memory_client: InMemoryFirestoreClient,
    channel: ListenerErrorChannel,
    settle,
) -> None:
    events: list[ListenerErrorEvent] = []
    channel.subscribe(events.append)
    memory_client.deny("requests")

    store.subscribe("requests", lambda docs: None, context=ListenerContext.REQUESTS)
    await settle()

    assert len(events) == 1
    assert events[0].context == ListenerContext.REQUESTS
    assert events[0].code == "permission-denied"


async def test_timestamps_strictly_increase_across_repositories(
    store: DocumentStore, monkeypatch, factories
) -> None:
    from app.infrastructure.firebase import document_store as module
    from app.infrastructure.firebase.repositories import FirestoreServiceRequestRepository

    frozen = datetime(2026, 3, 15, 12, 0, tzinfo=UTC)
    monkeypatch.setattr(module, "utc_now", lambda: frozen)

    created = await FirestoreServiceRequestRepository(store).create(factories.request("t1"))
    await FirestoreServiceRequestRepository(store).update_status(created.id, RequestStatus.COMPLETED)
    stored = await store.get("requests", created.id)

    assert created.created_at == frozen
    assert stored["updatedAt"] > stored["createdAt"]
