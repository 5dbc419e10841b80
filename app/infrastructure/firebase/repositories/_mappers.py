"""Entity <-> Firestore document mapping.

Documents use camelCase field names. Optional attributes that are None on
an entity are written as absent keys (UNSET, stripped by the document
store), never as null. In partial updates an explicit top-level None is
kept and stored as null.
"""

from __future__ import annotations

import math
from datetime import datetime
from enum import Enum
from typing import Any

from app.domain.entities import (
    Service,
    ServiceCategory,
    ServiceRequest,
    ServiceTier,
    Tenant,
    TenantBranding,
    TenantContact,
)
from app.domain.enums import HeroLayout, PricingType, RequestStatus
from app.domain.value_objects.core import I18nText
from app.shared.utils.unset import UNSET, none_as_unset


def to_camel(name: str) -> str:
    """snake_case attribute name to camelCase document field."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _i18n(value: I18nText | None) -> dict[str, str] | None:
    return value.to_dict() if value is not None else None


def _enum(value: Enum | str | None) -> str | None:
    if isinstance(value, Enum):
        return value.value
    return value


def _as_map(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_datetime(value: Any) -> datetime | None:
    return value if isinstance(value, datetime) else None


def _as_float(value: Any) -> float | None:
    """Numeric value, or None when missing or not a number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _as_int(value: Any, default: int | None = 0) -> int | None:
    """Integer value; anything that does not parse as a number falls back to default."""
    number = _as_float(value)
    return int(number) if number is not None else default


def branding_to_doc(branding: TenantBranding) -> dict[str, Any]:
    return none_as_unset({
        "logo": branding.logo,
        "heroImage": branding.hero_image,
        "primaryColor": branding.primary_color,
        "accentColor": branding.accent_color,
        "hideLogo": branding.hide_logo,
        "customDomain": branding.custom_domain,
        "heroLayout": _enum(branding.hero_layout),
    })


def branding_from_doc(data: Any) -> TenantBranding:
    data = _as_map(data)
    layout = data.get("heroLayout")
    hide_logo = data.get("hideLogo")
    return TenantBranding(
        logo=data.get("logo"),
        hero_image=data.get("heroImage"),
        primary_color=data.get("primaryColor"),
        accent_color=data.get("accentColor"),
        hide_logo=hide_logo if isinstance(hide_logo, bool) else None,
        custom_domain=data.get("customDomain"),
        hero_layout=HeroLayout(layout) if layout in HeroLayout.values() else None,
    )


def contact_to_doc(contact: TenantContact) -> dict[str, Any]:
    return none_as_unset({
        "email": contact.email,
        "phone": contact.phone,
        "whatsapp": contact.whatsapp,
        "address": contact.address,
    })


def contact_from_doc(data: Any) -> TenantContact:
    data = _as_map(data)
    email = data.get("email")
    return TenantContact(
        email=email if isinstance(email, str) else "",
        phone=data.get("phone"),
        whatsapp=data.get("whatsapp"),
        address=data.get("address"),
    )


def tenant_to_doc(tenant: Tenant) -> dict[str, Any]:
    return {
        "slug": tenant.slug,
        "name": tenant.name,
        "description": none_as_unset(_i18n(tenant.description)),
        "branding": branding_to_doc(tenant.branding),
        "contact": contact_to_doc(tenant.contact),
        "active": tenant.active,
        "createdAt": none_as_unset(tenant.created_at),
        "updatedAt": none_as_unset(tenant.updated_at),
    }


def tenant_from_doc(data: dict[str, Any]) -> Tenant:
    return Tenant(
        id=data["id"],
        slug=data.get("slug", ""),
        name=data.get("name", ""),
        description=I18nText.from_value(data.get("description")),
        branding=branding_from_doc(data.get("branding")),
        contact=contact_from_doc(data.get("contact")),
        active=bool(data.get("active", True)),
        created_at=_as_datetime(data.get("createdAt")),
        updated_at=_as_datetime(data.get("updatedAt")),
    )


def category_to_doc(category: ServiceCategory) -> dict[str, Any]:
    return {
        "name": category.name.to_dict(),
        "description": none_as_unset(_i18n(category.description)),
        "icon": category.icon,
        "color": none_as_unset(category.color),
        "order": category.order,
        "active": category.active,
    }


def category_from_doc(data: dict[str, Any]) -> ServiceCategory:
    return ServiceCategory(
        id=data["id"],
        name=I18nText.from_value(data.get("name")) or I18nText(en=data["id"]),
        description=I18nText.from_value(data.get("description")),
        icon=data.get("icon", ""),
        color=data.get("color"),
        order=_as_int(data.get("order")),
        active=bool(data.get("active", True)),
    )


def tier_to_doc(tier: ServiceTier) -> dict[str, Any]:
    return none_as_unset({
        "id": tier.id,
        "name": tier.name.to_dict(),
        "description": _i18n(tier.description),
        "price": tier.price,
        "image": tier.image,
        "badge": tier.badge,
    })


def tier_from_doc(data: dict[str, Any]) -> ServiceTier:
    return ServiceTier(
        id=str(data.get("id", "")),
        name=I18nText.from_value(data.get("name")) or I18nText(en=""),
        description=I18nText.from_value(data.get("description")),
        price=_as_float(data.get("price")),
        image=data.get("image"),
        badge=data.get("badge"),
    )


def service_to_doc(service: Service) -> dict[str, Any]:
    return {
        "tenantId": service.tenant_id,
        "categoryId": service.category_id,
        "name": service.name.to_dict(),
        "description": service.description.to_dict(),
        "shortDescription": none_as_unset(_i18n(service.short_description)),
        "image": none_as_unset(service.image),
        "icon": none_as_unset(service.icon),
        "pricingType": _enum(service.pricing_type),
        "price": none_as_unset(service.price),
        "currency": service.currency,
        "tiers": [tier_to_doc(t) for t in service.tiers] if service.tiers else UNSET,
        "active": service.active,
        "featured": service.featured,
        "order": service.order,
        "createdAt": none_as_unset(service.created_at),
        "updatedAt": none_as_unset(service.updated_at),
    }


def service_from_doc(data: dict[str, Any]) -> Service:
    pricing = data.get("pricingType")
    return Service(
        id=data["id"],
        tenant_id=data.get("tenantId", ""),
        category_id=data.get("categoryId", ""),
        name=I18nText.from_value(data.get("name")) or I18nText(en=""),
        description=I18nText.from_value(data.get("description")) or I18nText(en=""),
        short_description=I18nText.from_value(data.get("shortDescription")),
        image=data.get("image"),
        icon=data.get("icon"),
        pricing_type=PricingType(pricing) if pricing in PricingType.values() else PricingType.QUOTE,
        price=_as_float(data.get("price")),
        currency=data.get("currency") or "EUR",
        tiers=[tier_from_doc(t) for t in data.get("tiers") or [] if isinstance(t, dict)],
        active=bool(data.get("active", True)),
        featured=bool(data.get("featured", False)),
        order=_as_int(data.get("order")),
        created_at=_as_datetime(data.get("createdAt")),
        updated_at=_as_datetime(data.get("updatedAt")),
    )


def request_to_doc(request: ServiceRequest) -> dict[str, Any]:
    return {
        "tenantId": request.tenant_id,
        "serviceId": request.service_id,
        "serviceName": request.service_name.to_dict(),
        "categoryId": request.category_id,
        "guestName": request.guest_name,
        "guestEmail": none_as_unset(request.guest_email),
        "guestPhone": none_as_unset(request.guest_phone),
        "status": _enum(request.status),
        "selectedTier": none_as_unset(request.selected_tier),
        "selectedTierLabel": none_as_unset(_i18n(request.selected_tier_label)),
        "quantity": none_as_unset(request.quantity),
        "date": none_as_unset(request.date),
        "time": none_as_unset(request.time),
        "notes": none_as_unset(request.notes),
        "price": none_as_unset(request.price),
        "currency": request.currency,
        "createdAt": none_as_unset(request.created_at),
        "updatedAt": none_as_unset(request.updated_at),
    }


def request_from_doc(data: dict[str, Any]) -> ServiceRequest:
    status = data.get("status")
    return ServiceRequest(
        id=data["id"],
        tenant_id=data.get("tenantId", ""),
        service_id=data.get("serviceId", ""),
        service_name=I18nText.from_value(data.get("serviceName")) or I18nText(en=""),
        category_id=data.get("categoryId", ""),
        guest_name=data.get("guestName", ""),
        guest_email=data.get("guestEmail"),
        guest_phone=data.get("guestPhone"),
        status=RequestStatus(status) if status in RequestStatus.values() else RequestStatus.PENDING,
        selected_tier=data.get("selectedTier"),
        selected_tier_label=I18nText.from_value(data.get("selectedTierLabel")),
        quantity=_as_int(data.get("quantity"), default=None),
        date=_as_datetime(data.get("date")),
        time=data.get("time"),
        notes=data.get("notes"),
        price=_as_float(data.get("price")),
        currency=data.get("currency") or "EUR",
        created_at=_as_datetime(data.get("createdAt")),
        updated_at=_as_datetime(data.get("updatedAt")),
    )


def _patch_value(value: Any) -> Any:
    if isinstance(value, I18nText):
        return value.to_dict()
    if isinstance(value, TenantBranding):
        return branding_to_doc(value)
    if isinstance(value, TenantContact):
        return contact_to_doc(value)
    if isinstance(value, ServiceTier):
        return tier_to_doc(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_patch_value(v) for v in value]
    if isinstance(value, dict):
        return {to_camel(k): _patch_value(v) for k, v in value.items()}
    return value


def patch_to_doc(patch: dict[str, Any], *, immutable: tuple[str, ...] = ("id", "created_at")) -> dict[str, Any]:
    """Partial update with entity attribute names to top-level document fields.

    Keys in ``immutable`` are dropped. Explicit None is kept (stored as null).
    """
    return {
        to_camel(key): _patch_value(value)
        for key, value in patch.items()
        if key not in immutable
    }
