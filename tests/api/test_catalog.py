"""API tests for /api/v1/categories and /api/v1/services."""

from httpx import AsyncClient


def _service(tenant_id: str, **overrides) -> dict:
    body = {
        "tenant_id": tenant_id,
        "category_id": "transport",
        "name": {"en": "Airport Transfer", "bs": "Aerodromski Transfer"},
        "description": {"en": "Pickup", "bs": "Prevoz"},
        "pricing_type": "fixed",
        "price": 25,
    }
    body.update(overrides)
    return body


async def _tenant(client: AsyncClient, slug: str = "acme") -> str:
    """Create a tenant; the "transport" category is created too (409 on later calls is fine)."""
    await client.post("/api/v1/categories", json={"id": "transport", "name": {"en": "Transport"}, "icon": "car"})
    response = await client.post(
        "/api/v1/tenants", json={"slug": slug, "name": slug, "contact": {"email": f"h@{slug}.ba"}}
    )
    return response.json()["id"]


async def test_category_crud(client: AsyncClient) -> None:
    created = await client.post(
        "/api/v1/categories",
        json={"id": "transport", "name": {"en": "Transport"}, "icon": "car", "order": 2},
    )
    assert created.status_code == 201
    assert created.json()["name"] == {"en": "Transport", "bs": ""}

    await client.post("/api/v1/categories", json={"name": {"en": "Tours"}, "icon": "mountain", "order": 1})
    listed = (await client.get("/api/v1/categories")).json()
    assert [c["name"]["en"] for c in listed] == ["Tours", "Transport"]

    patched = await client.patch("/api/v1/categories/transport", json={"color": "blue"})
    assert patched.json()["color"] == "blue"

    assert (await client.delete("/api/v1/categories/transport")).status_code == 204
    assert (await client.patch("/api/v1/categories/transport", json={"order": 1})).status_code == 404


async def test_duplicate_category_id_conflict(client: AsyncClient) -> None:
    body = {"id": "transport", "name": {"en": "Transport"}, "icon": "car"}
    await client.post("/api/v1/categories", json=body)

    response = await client.post("/api/v1/categories", json=body)
    assert response.status_code == 409


async def test_create_service(client: AsyncClient) -> None:
    tenant_id = await _tenant(client)

    response = await client.post("/api/v1/services", json=_service(tenant_id))

    assert response.status_code == 201
    service = response.json()
    assert service["tenant_id"] == tenant_id
    assert service["price"] == 25.0
    assert service["currency"] == "EUR"
    assert service["tiers"] == []


async def test_free_service_has_no_price(client: AsyncClient) -> None:
    tenant_id = await _tenant(client)

    response = await client.post(
        "/api/v1/services", json=_service(tenant_id, pricing_type="free", price=10)
    )

    assert response.json()["price"] is None


async def test_priced_service_requires_price(client: AsyncClient) -> None:
    tenant_id = await _tenant(client)

    response = await client.post("/api/v1/services", json=_service(tenant_id, price=None))
    assert response.status_code == 422


async def test_service_for_unknown_tenant(client: AsyncClient) -> None:
    response = await client.post("/api/v1/services", json=_service("missing"))
    assert response.status_code == 404


async def test_list_services_by_tenant(client: AsyncClient) -> None:
    acme = await _tenant(client, "acme")
    beta = await _tenant(client, "beta")
    await client.post("/api/v1/services", json=_service(acme, order=1))
    await client.post("/api/v1/services", json=_service(acme, order=0, name={"en": "Taxi"}))
    await client.post("/api/v1/services", json=_service(beta))

    scoped = (await client.get("/api/v1/services", params={"tenant_id": acme})).json()
    everything = (await client.get("/api/v1/services")).json()

    assert [s["name"]["en"] for s in scoped] == ["Taxi", "Airport Transfer"]
    assert len(everything) == 3


async def test_patch_service_merges(client: AsyncClient) -> None:
    tenant_id = await _tenant(client)
    service = (await client.post("/api/v1/services", json=_service(tenant_id, icon="car"))).json()

    await client.patch(f"/api/v1/services/{service['id']}", json={"price": 30, "featured": True})
    response = await client.patch(f"/api/v1/services/{service['id']}", json={"price": 35, "icon": None})

    body = response.json()
    assert body["price"] == 35.0
    assert body["featured"] is True
    assert body["icon"] is None
    assert body["tenant_id"] == tenant_id


async def test_patch_service_tiers(client: AsyncClient) -> None:
    tenant_id = await _tenant(client)
    service = (await client.post("/api/v1/services", json=_service(tenant_id))).json()

    response = await client.patch(
        f"/api/v1/services/{service['id']}",
        json={
            "pricing_type": "variable",
            "tiers": [{"id": "premium", "name": {"en": "Premium", "bs": "Premium"}, "price": 55}],
        },
    )

    body = response.json()
    assert body["pricing_type"] == "variable"
    assert body["tiers"][0]["id"] == "premium"
    assert body["tiers"][0]["price"] == 55.0


async def test_delete_service(client: AsyncClient) -> None:
    tenant_id = await _tenant(client)
    service = (await client.post("/api/v1/services", json=_service(tenant_id))).json()

    assert (await client.delete(f"/api/v1/services/{service['id']}")).status_code == 204
    assert (await client.get(f"/api/v1/services/{service['id']}")).status_code == 404


async def test_category_id_must_be_identifier(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/categories", json={"id": "car services!", "name": {"en": "Car"}, "icon": "car"}
    )
    assert response.status_code == 422


async def test_service_price_display(client: AsyncClient) -> None:
    tenant_id = await _tenant(client)

    fixed = (await client.post("/api/v1/services", json=_service(tenant_id, price=1234.5))).json()
    quote = (
        await client.post("/api/v1/services", json=_service(tenant_id, pricing_type="quote", price=None))
    ).json()

    assert fixed["price_display"] == {"en": "€1,234.50", "bs": "1 234,50 €"}
    assert quote["price_display"] == {"en": "Request Quote", "bs": "Na upit"}


async def test_service_image_must_be_url(client: AsyncClient) -> None:
    tenant_id = await _tenant(client)

    response = await client.post("/api/v1/services", json=_service(tenant_id, image="/local/img.png"))
    assert response.status_code == 422


async def test_service_requires_existing_category(client: AsyncClient) -> None:
    tenant_id = await _tenant(client)

    response = await client.post("/api/v1/services", json=_service(tenant_id, category_id="spa"))

    assert response.status_code == 404
    assert response.json()["details"] == {"resource_type": "category", "resource_id": "spa"}


async def test_patch_service_to_unknown_category(client: AsyncClient) -> None:
    tenant_id = await _tenant(client)
    service = (await client.post("/api/v1/services", json=_service(tenant_id))).json()
    await client.post("/api/v1/categories", json={"id": "tours", "name": {"en": "Tours"}, "icon": "map"})

    unknown = await client.patch(f"/api/v1/services/{service['id']}", json={"category_id": "spa"})
    moved = await client.patch(f"/api/v1/services/{service['id']}", json={"category_id": "tours"})

    assert unknown.status_code == 404
    assert moved.json()["category_id"] == "tours"


async def test_list_services_paged(client: AsyncClient) -> None:
    tenant_id = await _tenant(client)
    first = (await client.post("/api/v1/services", json=_service(tenant_id, name={"en": "Taxi"}))).json()
    second = (await client.post("/api/v1/services", json=_service(tenant_id, name={"en": "Bus"}))).json()

    page = (await client.get("/api/v1/services", params={"tenant_id": tenant_id, "page_size": 1})).json()
    assert [s["id"] for s in page["items"]] == [second["id"]]
    assert page["has_more"] is True
    assert page["next_cursor"] == second["id"]

    last = (
        await client.get(
            "/api/v1/services", params={"tenant_id": tenant_id, "page_size": 1, "cursor": page["next_cursor"]}
        )
    ).json()
    assert [s["id"] for s in last["items"]] == [first["id"]]
    assert last["has_more"] is False
    assert last["next_cursor"] is None


async def test_list_services_bad_page_params(client: AsyncClient) -> None:
    too_big = await client.get("/api/v1/services", params={"page_size": 1000})
    bad_cursor = await client.get("/api/v1/services", params={"cursor": "missing"})

    assert too_big.status_code == 422
    assert bad_cursor.status_code == 400
    assert bad_cursor.json()["details"] == {"field": "cursor"}
