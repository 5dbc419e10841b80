"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import (
    Service,
    ServiceCategory,
    ServiceRequest,
    ServiceTier,
    Tenant,
    TenantBranding,
    TenantContact,
    User,
)
from app.domain.enums import HeroLayout, Locale, PricingType, RequestStatus, UserRole
from app.domain.exceptions import (
    DevelopmentOnlyException,
    ResourceNotFoundException,
    StayPlusException,
    StoreNotConfiguredException,
    TenantSlugTakenException,
    ValidationException,
)
from app.domain.value_objects import I18nText, TenantSlug

__all__ = [
    # Entities
    "Service",
    "ServiceCategory",
    "ServiceRequest",
    "ServiceTier",
    "Tenant",
    "TenantBranding",
    "TenantContact",
    "User",
    # Enums
    "HeroLayout",
    "Locale",
    "PricingType",
    "RequestStatus",
    "UserRole",
    # Exceptions
    "DevelopmentOnlyException",
    "ResourceNotFoundException",
    "StayPlusException",
    "StoreNotConfiguredException",
    "TenantSlugTakenException",
    "ValidationException",
    # Value objects
    "I18nText",
    "TenantSlug",
]
