"""Tenant API schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator

from app.domain.entities import Tenant, TenantBranding, TenantContact
from app.domain.enums import HeroLayout
from app.domain.value_objects import TenantSlug
from app.schemas.common import I18nTextSchema, build_patch, i18n_or_none, validate_url
from app.shared.utils.format import slugify

_HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"


def _validate_slug(value: str) -> str:
    """Normalize then check with TenantSlug (e.g. ' Sunny-Sarajevo ' -> 'sunny-sarajevo')."""
    return TenantSlug(value.strip().lower()).value


class TenantBrandingResponse(BaseModel):
    """Branding as stored; returned unvalidated so older documents still render."""

    model_config = ConfigDict(from_attributes=True)

    logo: str | None = None
    hero_image: str | None = None
    primary_color: str | None = None
    accent_color: str | None = None
    hide_logo: bool | None = None
    custom_domain: str | None = None
    hero_layout: HeroLayout | None = None


class TenantBrandingSchema(TenantBrandingResponse):
    primary_color: str | None = Field(default=None, pattern=_HEX_COLOR)
    accent_color: str | None = Field(default=None, pattern=_HEX_COLOR)

    @field_validator("logo", "hero_image")
    @classmethod
    def check_urls(cls, v: str | None) -> str | None:
        return validate_url(v)

    def to_value(self) -> TenantBranding:
        return TenantBranding(**self.model_dump())


class TenantContactResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    email: str
    phone: str | None = None
    whatsapp: str | None = None
    address: str | None = None


class TenantContactSchema(TenantContactResponse):
    email: EmailStr

    def to_value(self) -> TenantContact:
        return TenantContact(**self.model_dump())


class TenantCreate(BaseModel):
    """Request body for POST /tenants. The slug must not be used by another tenant."""

    slug: str | None = Field(
        default=None, min_length=1, max_length=100, description="Public portal key; derived from name when omitted"
    )
    name: str = Field(..., min_length=1, max_length=255)
    contact: TenantContactSchema
    branding: TenantBrandingSchema = Field(default_factory=TenantBrandingSchema)
    description: I18nTextSchema | None = None
    active: bool = True

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: str | None) -> str | None:
        return _validate_slug(v) if v is not None else None

    @model_validator(mode="after")
    def default_slug(self) -> "TenantCreate":
        if self.slug is None:
            self.slug = _validate_slug(slugify(self.name))
        return self

    def to_entity(self) -> Tenant:
        return Tenant(
            id="",
            slug=self.slug,
            name=self.name,
            contact=self.contact.to_value(),
            branding=self.branding.to_value(),
            description=i18n_or_none(self.description),
            active=self.active,
        )


class TenantUpdate(BaseModel):
    """Request body for PATCH /tenants/{id}; only fields sent are changed."""

    slug: str | None = Field(default=None, min_length=1, max_length=100)
    name: str | None = Field(default=None, min_length=1, max_length=255)
    contact: TenantContactSchema | None = None
    branding: TenantBrandingSchema | None = None
    description: I18nTextSchema | None = None
    active: bool | None = None

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: str | None) -> str | None:
        return _validate_slug(v) if v is not None else None

    def to_patch(self) -> dict[str, Any]:
        return build_patch(self, nullable=("description",))


class TenantResponse(BaseModel):
    """Tenant in list/get responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    slug: str
    name: str
    contact: TenantContactResponse
    branding: TenantBrandingResponse
    description: I18nTextSchema | None = None
    active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
