"""Tenant entity: one per property/host, the unit of branding and data ownership."""

from dataclasses import dataclass, field
from datetime import datetime

from app.domain.enums import HeroLayout
from app.domain.value_objects.core import I18nText


@dataclass
class TenantBranding:
    """Portal branding. Every attribute is optional; an empty branding is the default."""

    logo: str | None = None
    hero_image: str | None = None
    primary_color: str | None = None
    accent_color: str | None = None
    hide_logo: bool | None = None
    custom_domain: str | None = None
    hero_layout: HeroLayout | None = None


@dataclass
class TenantContact:
    """Host contact details. Email is required, the rest optional."""

    email: str
    phone: str | None = None
    whatsapp: str | None = None
    address: str | None = None


@dataclass
class Tenant:
    """Property/host account.

    The slug is globally unique and is the only key the public portal
    resolves a tenant by. Deleting a tenant does not delete its services.
    """

    id: str
    slug: str
    name: str
    contact: TenantContact
    branding: TenantBranding = field(default_factory=TenantBranding)
    description: I18nText | None = None
    active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
