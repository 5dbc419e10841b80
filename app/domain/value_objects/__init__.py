"""Domain value objects and shared value types."""

from app.domain.value_objects.core import I18nText, TenantSlug

__all__ = [
    "I18nText",
    "TenantSlug",
]
