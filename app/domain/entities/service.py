"""Service entity (bookable offering owned by one tenant) and its embedded tiers."""

from dataclasses import dataclass, field
from datetime import datetime

from app.domain.enums import PricingType
from app.domain.value_objects.core import I18nText


@dataclass
class ServiceTier:
    """Named sub-option of a service. Embedded in the service, not addressable on its own."""

    id: str
    name: I18nText
    description: I18nText | None = None
    price: float | None = None
    image: str | None = None
    badge: str | None = None


@dataclass
class Service:
    """Bookable offering of exactly one tenant.

    price is required only for fixed/variable pricing; a tier price, when
    set, overrides the base price for a guest's selection.
    """

    id: str
    tenant_id: str
    category_id: str
    name: I18nText
    description: I18nText
    pricing_type: PricingType
    currency: str = "EUR"
    price: float | None = None
    short_description: I18nText | None = None
    image: str | None = None
    icon: str | None = None
    tiers: list[ServiceTier] = field(default_factory=list)
    active: bool = True
    featured: bool = False
    order: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def get_tier(self, tier_id: str) -> ServiceTier | None:
        return next((t for t in self.tiers if t.id == tier_id), None)

    def price_for_tier(self, tier_id: str | None) -> float | None:
        """Return the selected tier's price when it has one, otherwise the base price."""
        if tier_id:
            tier = self.get_tier(tier_id)
            if tier is not None and tier.price is not None:
                return tier.price
        return self.price
