"""Tests for the in-memory Firestore client."""

from datetime import UTC, datetime

import pytest

from app.infrastructure.exceptions import (
    DocumentExistsError,
    DocumentNotFoundError,
    PermissionDeniedError,
)
from app.infrastructure.firebase.memory_client import InMemoryFirestoreClient
from app.infrastructure.firebase.query import DESCENDING
from app.infrastructure.firebase.timestamps import Timestamp
from app.shared.utils.unset import UNSET


async def test_set_get_and_copy_isolation(memory_client: InMemoryFirestoreClient) -> None:
    data = {"name": "Acme", "tags": ["a"]}
    await memory_client.collection("tenants").document("t1").set(data)
    data["tags"].append("b")

    snapshot = await memory_client.collection("tenants").document("t1").get()
    assert snapshot.id == "t1"
    assert snapshot.to_dict() == {"name": "Acme", "tags": ["a"]}

    snapshot.to_dict()["name"] = "Changed"
    again = await memory_client.collection("tenants").document("t1").get()
    assert again.to_dict()["name"] == "Acme"


async def test_missing_document_is_none(memory_client: InMemoryFirestoreClient) -> None:
    assert await memory_client.collection("tenants").document("nope").get() is None


async def test_datetimes_stored_as_timestamp(memory_client: InMemoryFirestoreClient) -> None:
    await memory_client.collection("requests").document("r1").set(
        {"createdAt": datetime(2024, 5, 1, 8, 30, tzinfo=UTC)}
    )
    snapshot = await memory_client.collection("requests").document("r1").get()
    assert isinstance(snapshot.to_dict()["createdAt"], Timestamp)


async def test_unset_rejected(memory_client: InMemoryFirestoreClient) -> None:
    with pytest.raises(TypeError, match="undefined"):
        await memory_client.collection("tenants").document("t1").set({"branding": {"logo": UNSET}})


async def test_create_fails_when_document_exists(memory_client: InMemoryFirestoreClient) -> None:
    collection = memory_client.collection("tenants")
    await collection.create("t1", {"slug": "acme"})
    with pytest.raises(DocumentExistsError):
        await collection.create("t1", {"slug": "other"})


async def test_update_merges_and_requires_document(memory_client: InMemoryFirestoreClient) -> None:
    ref = memory_client.collection("tenants").document("t1")
    with pytest.raises(DocumentNotFoundError):
        await ref.update({"name": "Acme"})

    await ref.set({"name": "Acme", "active": True})
    await ref.update({"active": False})
    assert (await ref.get()).to_dict() == {"name": "Acme", "active": False}


async def test_delete_is_idempotent(memory_client: InMemoryFirestoreClient) -> None:
    ref = memory_client.collection("tenants").document("t1")
    await ref.set({"name": "Acme"})
    await ref.delete()
    await ref.delete()
    assert await ref.get() is None


async def test_query_filter_order_limit(memory_client: InMemoryFirestoreClient) -> None:
    services = memory_client.collection("services")
    await services.document("a").set({"tenantId": "t1", "order": 2})
    await services.document("b").set({"tenantId": "t1", "order": 1})
    await services.document("c").set({"tenantId": "t2", "order": 0})
    await services.document("d").set({"tenantId": "t1"})

    ascending = await services.where("tenantId", "==", "t1").order_by("order").get()
    assert [s.id for s in ascending] == ["b", "a"]

    descending = await services.order_by("order", DESCENDING).limit(2).get()
    assert [s.id for s in descending] == ["a", "b"]


async def test_listener_initial_delivery_and_changes(
    memory_client: InMemoryFirestoreClient, settle
) -> None:
    received: list[list[str]] = []
    query = memory_client.collection("tenants").order_by("slug")
    unsubscribe = query.on_snapshot(lambda docs: received.append([d.id for d in docs]), lambda exc: None)

    await settle()
    assert received == [[]]

    await memory_client.collection("tenants").document("t1").set({"slug": "acme"})
    await settle()
    assert received[-1] == ["t1"]

    # Writes elsewhere do not produce a delivery
    await memory_client.collection("services").document("s1").set({"slug": "x"})
    await settle()
    assert len(received) == 2

    unsubscribe()
    await memory_client.collection("tenants").document("t2").set({"slug": "beta"})
    await settle()
    assert len(received) == 2


async def test_denied_collection_fails_operations_and_listeners(
    memory_client: InMemoryFirestoreClient, settle
) -> None:
    errors: list[Exception] = []
    memory_client.collection("requests").on_snapshot(lambda docs: None, errors.append)
    await settle()

    memory_client.deny("requests")
    await settle()

    assert len(errors) == 1
    assert isinstance(errors[0], PermissionDeniedError)
    with pytest.raises(PermissionDeniedError):
        await memory_client.collection("requests").get()

    memory_client.allow("requests")
    await memory_client.collection("requests").document("r1").set({"guestName": "Ana"})
    await settle()
    assert len(errors) == 1


async def test_listener_stops_when_callback_raises(
    memory_client: InMemoryFirestoreClient, settle
) -> None:
    calls: list[int] = []
    errors: list[Exception] = []

    def on_change(docs) -> None:
        calls.append(len(docs))
        raise ValueError("bad document")

    memory_client.collection("tenants").on_snapshot(on_change, errors.append)
    await settle()

    assert calls == [0]
    assert [str(e) for e in errors] == ["bad document"]

    await memory_client.collection("tenants").document("t1").set({"slug": "acme"})
    await settle()
    assert calls == [0]


async def test_batch_write_all_or_nothing(memory_client: InMemoryFirestoreClient) -> None:
    await memory_client.batch_write(
        [
            {"path": "tenants/t1", "data": {"slug": "acme"}},
            {"path": "services/s1", "data": {"tenantId": "t1"}},
        ]
    )
    assert len(await memory_client.collection("tenants").get()) == 1

    memory_client.deny("services")
    with pytest.raises(PermissionDeniedError):
        await memory_client.batch_write(
            [
                {"path": "tenants/t1", "delete": True},
                {"path": "services/s1", "delete": True},
            ]
        )
    assert len(await memory_client.collection("tenants").get()) == 1
