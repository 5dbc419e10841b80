"""API tests for the public guest portal."""

import pytest
from httpx import AsyncClient

from app.core.constants import RATE_LIMIT_GUEST_REQUESTS
from app.domain.entities import ServiceTier
from app.domain.enums import PricingType
from app.domain.value_objects import I18nText


@pytest.fixture
async def acme(tenant_repo, service_repo, category_repo, factories):
    tenant = await tenant_repo.create(factories.tenant("acme"))
    await category_repo.create(factories.category("transport"))
    await service_repo.create(
        factories.service(
            tenant.id,
            id="rent-a-car",
            pricing_type=PricingType.VARIABLE,
            price=35.0,
            tiers=[ServiceTier(id="premium", name=I18nText("Premium", "Premium"), price=55.0)],
        )
    )
    return tenant


async def test_get_portal(client: AsyncClient, acme) -> None:
    response = await client.get("/api/v1/portal/acme")

    assert response.status_code == 200
    body = response.json()
    assert body["tenant"]["slug"] == "acme"
    assert [s["id"] for s in body["services"]] == ["rent-a-car"]
    assert [c["id"] for c in body["categories"]] == ["transport"]
    assert body["featured"] == []


async def test_unknown_and_inactive_portal(client: AsyncClient, tenant_repo, acme) -> None:
    assert (await client.get("/api/v1/portal/nope")).status_code == 404

    await tenant_repo.update(acme.id, {"active": False})
    assert (await client.get("/api/v1/portal/acme")).status_code == 404


async def test_portal_service_scoped_to_tenant(
    client: AsyncClient, tenant_repo, service_repo, factories, acme
) -> None:
    other = await tenant_repo.create(factories.tenant("other"))
    await service_repo.create(factories.service(other.id, id="foreign"))

    assert (await client.get("/api/v1/portal/acme/services/rent-a-car")).status_code == 200
    assert (await client.get("/api/v1/portal/acme/services/foreign")).status_code == 404


async def test_submit_request(client: AsyncClient, acme) -> None:
    response = await client.post(
        "/api/v1/portal/acme/requests",
        json={
            "service_id": "rent-a-car",
            "guest_name": "Ana <script>x</script>",
            "selected_tier": "premium",
            "quantity": 2,
            "date": "2026-07-01T10:00:00Z",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "pending"
    assert body["tenant_id"] == acme.id
    assert body["guest_name"] == "Ana"
    assert body["price"] == 55.0
    assert body["selected_tier_label"] == {"en": "Premium", "bs": "Premium"}


async def test_submit_request_errors(client: AsyncClient, acme) -> None:
    unknown_tier = await client.post(
        "/api/v1/portal/acme/requests",
        json={"service_id": "rent-a-car", "guest_name": "Ana", "selected_tier": "gold"},
    )
    unknown_service = await client.post(
        "/api/v1/portal/acme/requests", json={"service_id": "nope", "guest_name": "Ana"}
    )
    bad_quantity = await client.post(
        "/api/v1/portal/acme/requests",
        json={"service_id": "rent-a-car", "guest_name": "Ana", "quantity": 0},
    )

    assert unknown_tier.status_code == 400
    assert unknown_tier.json()["details"] == {"field": "selected_tier"}
    assert unknown_service.status_code == 404
    assert bad_quantity.status_code == 422


async def test_submit_request_rejects_invalid_email(client: AsyncClient, acme) -> None:
    response = await client.post(
        "/api/v1/portal/acme/requests",
        json={"service_id": "rent-a-car", "guest_name": "Ana", "guest_email": "not-an-email"},
    )

    assert response.status_code == 422


async def test_submit_request_rate_limited(client: AsyncClient, acme) -> None:
    allowed = int(RATE_LIMIT_GUEST_REQUESTS.split("/")[0])
    body = {"service_id": "rent-a-car", "guest_name": "Ana"}

    for _ in range(allowed):
        assert (await client.post("/api/v1/portal/acme/requests", json=body)).status_code == 201
    response = await client.post("/api/v1/portal/acme/requests", json=body)

    assert response.status_code == 429
