"""Shared enumerations for the StayPlus application.

Cross-cutting enums used by application and infrastructure. Domain-specific
enums (e.g. PricingType) live in app.domain.enums.
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class ListenerContext(_ValuesMixin, str, Enum):
    """Which live subscription a listener error belongs to.

    Publishers (document store listeners) and subscribers (live stores)
    must agree on these values; an unknown context is never delivered.
    """

    TENANTS = "tenants"
    CATEGORIES = "categories"
    SERVICES = "services"
    REQUESTS = "requests"


class StoreState(_ValuesMixin, str, Enum):
    """Lifecycle of one live store activation."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"
