"""Tests for the guest portal use case."""

import pytest

from app.application.dtos.portal import GuestRequestForm
from app.application.use_cases.guest_portal import GuestPortalService
from app.domain.entities import ServiceTier
from app.domain.enums import PricingType, RequestStatus
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.domain.value_objects import I18nText


@pytest.fixture
def portal(tenant_repo, service_repo, category_repo, request_repo) -> GuestPortalService:
    return GuestPortalService(tenant_repo, service_repo, category_repo, request_repo)


@pytest.fixture
async def acme(tenant_repo, service_repo, category_repo, factories):
    tenant = await tenant_repo.create(factories.tenant("acme"))
    await category_repo.create(factories.category("transport", order=1))
    await category_repo.create(factories.category("tours", order=2))
    await service_repo.create(
        factories.service(
            tenant.id,
            id="rent-a-car",
            pricing_type=PricingType.VARIABLE,
            price=35.0,
            featured=True,
            tiers=[ServiceTier(id="premium", name=I18nText("Premium", "Premium"), price=55.0)],
        )
    )
    await service_repo.create(factories.service(tenant.id, id="hidden", category_id="tours", active=False))
    return tenant


async def test_get_portal(portal: GuestPortalService, acme) -> None:
    result = await portal.get_portal("acme")

    assert result.tenant.id == acme.id
    assert [s.id for s in result.services] == ["rent-a-car"]
    assert [c.id for c in result.categories] == ["transport"]
    assert [s.id for s in result.featured] == ["rent-a-car"]


async def test_unknown_or_inactive_tenant(portal: GuestPortalService, tenant_repo, acme) -> None:
    assert await portal.get_portal("nope") is None

    await tenant_repo.update(acme.id, {"active": False})
    assert await portal.get_portal("acme") is None


async def test_get_service_is_tenant_scoped(
    portal: GuestPortalService, tenant_repo, service_repo, factories, acme
) -> None:
    other = await tenant_repo.create(factories.tenant("other"))
    await service_repo.create(factories.service(other.id, id="foreign"))

    assert (await portal.get_service("acme", "rent-a-car")).id == "rent-a-car"
    assert await portal.get_service("acme", "foreign") is None
    assert await portal.get_service("acme", "hidden") is None


async def test_submit_request_snapshots_service(portal: GuestPortalService, request_repo, acme) -> None:
    request = await portal.submit_request(
        "acme",
        "rent-a-car",
        GuestRequestForm(
            guest_name=" <b>Ana</b> ",
            guest_email="Ana@Example.com",
            selected_tier="premium",
            quantity=2,
            notes="Child seat please",
        ),
    )

    stored = await request_repo.get_by_id(request.id)
    assert stored.tenant_id == acme.id
    assert stored.status == RequestStatus.PENDING
    assert stored.guest_name == "Ana"
    assert stored.guest_email == "ana@example.com"
    assert stored.guest_phone is None
    assert stored.selected_tier_label == I18nText("Premium", "Premium")
    assert stored.price == 55.0
    assert stored.service_name == I18nText("Airport Transfer", "Aerodromski Transfer")
    assert stored.created_at is not None


async def test_submit_request_without_tier_uses_base_price(portal: GuestPortalService, acme) -> None:
    request = await portal.submit_request("acme", "rent-a-car", GuestRequestForm(guest_name="Ana"))
    assert request.price == 35.0
    assert request.selected_tier is None


async def test_submit_request_validation(portal: GuestPortalService, acme) -> None:
    with pytest.raises(ValidationException, match="Guest name"):
        await portal.submit_request("acme", "rent-a-car", GuestRequestForm(guest_name="<i></i>"))
    with pytest.raises(ValidationException, match="Unknown tier"):
        await portal.submit_request(
            "acme", "rent-a-car", GuestRequestForm(guest_name="Ana", selected_tier="gold")
        )


async def test_submit_request_not_found(portal: GuestPortalService, acme) -> None:
    with pytest.raises(ResourceNotFoundException):
        await portal.submit_request("nope", "rent-a-car", GuestRequestForm(guest_name="Ana"))
    with pytest.raises(ResourceNotFoundException):
        await portal.submit_request("acme", "hidden", GuestRequestForm(guest_name="Ana"))
