"""API tests for the development seed and reset endpoints."""

import pytest
from httpx import AsyncClient

from app.core.config import get_settings


async def test_seed_then_idempotent(client: AsyncClient) -> None:
    first = await client.post("/api/v1/dev/seed")
    second = await client.post("/api/v1/dev/seed")

    assert first.status_code == 200
    assert first.json() == {"tenants": 3, "categories": 8, "services": 56}
    assert second.json() == {"tenants": 0, "categories": 0, "services": 0}

    portal = await client.get("/api/v1/portal/sunny-sarajevo")
    assert portal.status_code == 200
    assert portal.json()["services"]


async def test_reset_restores_dataset(client: AsyncClient, tenant_repo, factories) -> None:
    await client.post("/api/v1/dev/seed")
    await tenant_repo.create(factories.tenant("acme"))

    response = await client.post("/api/v1/dev/reset")

    assert response.json() == {"tenants": 3, "categories": 0, "services": 56}
    assert (await client.get("/api/v1/portal/acme")).status_code == 404


async def test_refused_outside_development(client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    get_settings.cache_clear()

    for path in ("/api/v1/dev/seed", "/api/v1/dev/reset"):
        response = await client.post(path)
        assert response.status_code == 403
        assert response.json()["error"] == "DEVELOPMENT_ONLY"
    assert (await client.get("/api/v1/tenants")).json() == []
