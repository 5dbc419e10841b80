"""Service (bookable offering) API schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

from app.domain.entities import Service, ServiceTier
from app.domain.enums import Locale, PricingType
from app.schemas.common import I18nTextSchema, build_patch, i18n_or_none, validate_url
from app.shared.utils.format import get_pricing_display

_PRICED = (PricingType.FIXED, PricingType.VARIABLE)


class ServiceTierSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., min_length=1)
    name: I18nTextSchema
    description: I18nTextSchema | None = None
    price: float | None = Field(default=None, ge=0)
    image: str | None = None
    badge: str | None = None

    def to_value(self) -> ServiceTier:
        return ServiceTier(
            id=self.id,
            name=self.name.to_value(),
            description=i18n_or_none(self.description),
            price=self.price,
            image=self.image,
            badge=self.badge,
        )


class ServiceCreate(BaseModel):
    """Request body for POST /services.

    price is required for fixed and variable pricing and ignored otherwise.
    """

    tenant_id: str = Field(..., min_length=1)
    category_id: str = Field(..., min_length=1)
    name: I18nTextSchema
    description: I18nTextSchema
    pricing_type: PricingType
    price: float | None = Field(default=None, ge=0)
    currency: str = Field(default="EUR", min_length=3, max_length=3)
    short_description: I18nTextSchema | None = None
    image: str | None = None
    icon: str | None = None
    tiers: list[ServiceTierSchema] = Field(default_factory=list)
    active: bool = True
    featured: bool = False
    order: int = 0

    @field_validator("image")
    @classmethod
    def check_image(cls, v: str | None) -> str | None:
        return validate_url(v)

    @model_validator(mode="after")
    def check_price(self) -> "ServiceCreate":
        if self.pricing_type in _PRICED and self.price is None:
            raise ValueError(f"price is required for {self.pricing_type.value} pricing")
        return self

    def to_entity(self) -> Service:
        return Service(
            id="",
            tenant_id=self.tenant_id,
            category_id=self.category_id,
            name=self.name.to_value(),
            description=self.description.to_value(),
            pricing_type=self.pricing_type,
            price=self.price if self.pricing_type in _PRICED else None,
            currency=self.currency,
            short_description=i18n_or_none(self.short_description),
            image=self.image,
            icon=self.icon,
            tiers=[t.to_value() for t in self.tiers],
            active=self.active,
            featured=self.featured,
            order=self.order,
        )


class ServiceUpdate(BaseModel):
    """Partial update. tenant_id cannot be changed."""

    category_id: str | None = Field(default=None, min_length=1)
    name: I18nTextSchema | None = None
    description: I18nTextSchema | None = None
    pricing_type: PricingType | None = None
    price: float | None = Field(default=None, ge=0)
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    short_description: I18nTextSchema | None = None
    image: str | None = None
    icon: str | None = None
    tiers: list[ServiceTierSchema] | None = None
    active: bool | None = None
    featured: bool | None = None
    order: int | None = None

    @field_validator("image")
    @classmethod
    def check_image(cls, v: str | None) -> str | None:
        return validate_url(v)

    def to_patch(self) -> dict[str, Any]:
        return build_patch(self, nullable=("price", "short_description", "image", "icon"))


class ServiceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    tenant_id: str
    category_id: str
    name: I18nTextSchema
    description: I18nTextSchema
    pricing_type: PricingType
    price: float | None = None
    currency: str
    short_description: I18nTextSchema | None = None
    image: str | None = None
    icon: str | None = None
    tiers: list[ServiceTierSchema] = Field(default_factory=list)
    active: bool
    featured: bool
    order: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @computed_field
    @property
    def price_display(self) -> I18nTextSchema:
        """Guest-facing price label in both languages (e.g. 'From €35' / 'Od 35 €')."""
        return I18nTextSchema(
            en=get_pricing_display(self.pricing_type, self.price, self.currency, Locale.EN),
            bs=get_pricing_display(self.pricing_type, self.price, self.currency, Locale.BS),
        )


class ServicePageResponse(BaseModel):
    """One page of GET /services?page_size=...; pass next_cursor back as ``cursor``."""

    model_config = ConfigDict(from_attributes=True)

    items: list[ServiceResponse]
    next_cursor: str | None = None
    has_more: bool
