"""Tests for entity <-> document mapping."""

from datetime import UTC, datetime

from app.domain.entities import (
    Service,
    ServiceRequest,
    ServiceTier,
    Tenant,
    TenantBranding,
    TenantContact,
)
from app.domain.enums import HeroLayout, PricingType, RequestStatus
from app.domain.value_objects import I18nText
from app.infrastructure.firebase.repositories._mappers import (
    patch_to_doc,
    request_from_doc,
    request_to_doc,
    service_from_doc,
    service_to_doc,
    tenant_from_doc,
    tenant_to_doc,
    to_camel,
)
from app.shared.utils.unset import UNSET, strip_unset


def test_to_camel() -> None:
    assert to_camel("tenant_id") == "tenantId"
    assert to_camel("selected_tier_label") == "selectedTierLabel"
    assert to_camel("slug") == "slug"


def test_tenant_optional_fields_become_unset() -> None:
    tenant = Tenant(
        id="t1",
        slug="acme",
        name="Acme Lodge",
        contact=TenantContact(email="a@b.com"),
        branding=TenantBranding(primary_color="#112233", hero_layout=HeroLayout.SPLIT),
    )
    doc = strip_unset(tenant_to_doc(tenant))
    assert doc == {
        "slug": "acme",
        "name": "Acme Lodge",
        "branding": {"primaryColor": "#112233", "heroLayout": "split"},
        "contact": {"email": "a@b.com"},
        "active": True,
    }


def test_tenant_from_doc_defaults() -> None:
    tenant = tenant_from_doc({"id": "t1", "slug": "acme", "name": "Acme", "contact": {"email": "a@b.com"}})
    assert tenant.active is True
    assert tenant.branding == TenantBranding()
    assert tenant.description is None


def test_service_without_price_or_tiers_omits_them() -> None:
    service = Service(
        id="s1",
        tenant_id="t1",
        category_id="c1",
        name=I18nText("X", "X"),
        description=I18nText("d", "d"),
        pricing_type=PricingType.FREE,
    )
    doc = service_to_doc(service)
    assert doc["price"] is UNSET
    assert doc["tiers"] is UNSET
    assert "price" not in strip_unset(doc)


def test_service_round_trip_with_tiers() -> None:
    created = datetime(2024, 1, 1, tzinfo=UTC)
    service = Service(
        id="rent-a-car",
        tenant_id="sunny-sarajevo",
        category_id="transport",
        name=I18nText("Rent a Car", "Rent-a-Car"),
        description=I18nText("Cars", "Auta"),
        pricing_type=PricingType.VARIABLE,
        price=35.0,
        tiers=[ServiceTier(id="premium", name=I18nText("Premium", "Premium"), price=55.0)],
        created_at=created,
        updated_at=created,
    )
    doc = strip_unset(service_to_doc(service))
    doc["id"] = "rent-a-car"
    assert service_from_doc(doc) == service


def test_unknown_pricing_type_reads_as_quote() -> None:
    service = service_from_doc({"id": "s1", "pricingType": "barter"})
    assert service.pricing_type == PricingType.QUOTE


def test_unparseable_fields_get_defaults() -> None:
    service = service_from_doc(
        {"id": "s1", "order": "first", "price": "abc", "tiers": [{"id": "t", "price": float("nan")}]}
    )
    tenant = tenant_from_doc({"id": "t1", "contact": "host", "branding": {"hideLogo": "yes"}, "description": 3})
    request = request_from_doc({"id": "r1", "quantity": "two"})

    assert service.order == 0
    assert service.price is None
    assert service.tiers[0].price is None
    assert tenant.contact.email == ""
    assert tenant.branding.hide_logo is None
    assert tenant.description is None
    assert request.quantity is None


def test_request_round_trip() -> None:
    request = ServiceRequest(
        id="r1",
        tenant_id="t1",
        service_id="rent-a-car",
        service_name=I18nText("Rent a Car", "Rent-a-Car"),
        category_id="transport",
        guest_name="Ana",
        selected_tier="premium",
        selected_tier_label=I18nText("Premium", "Premium"),
        price=55.0,
        status=RequestStatus.CONFIRMED,
    )
    doc = strip_unset(request_to_doc(request))
    assert doc["selectedTierLabel"] == {"en": "Premium", "bs": "Premium"}
    assert "guestEmail" not in doc
    doc["id"] = "r1"
    assert request_from_doc(doc) == request


def test_patch_to_doc_converts_values_and_keeps_explicit_none() -> None:
    patch = {
        "id": "ignored",
        "created_at": "ignored",
        "short_description": I18nText("Short", "Kratko"),
        "pricing_type": PricingType.QUOTE,
        "price": None,
        "tiers": [ServiceTier(id="std", name=I18nText("Standard", "Standard"))],
    }
    assert strip_unset(patch_to_doc(patch)) == {
        "shortDescription": {"en": "Short", "bs": "Kratko"},
        "pricingType": "quote",
        "price": None,
        "tiers": [{"id": "std", "name": {"en": "Standard", "bs": "Standard"}}],
    }
