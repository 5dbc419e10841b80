"""Domain enumerations for the StayPlus application.

Enums represent fixed sets of domain values stored as plain strings in
documents (pricing type, request status, user role, locale).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class Locale(_ValuesMixin, str, Enum):
    """Supported UI/content languages. English is the fallback."""

    EN = "en"
    BS = "bs"


class PricingType(_ValuesMixin, str, Enum):
    """How a service is priced.

    free and quote need no numeric price; for fixed and variable the
    price is the base (or "from") price.
    """

    FIXED = "fixed"
    VARIABLE = "variable"
    QUOTE = "quote"
    FREE = "free"


class RequestStatus(_ValuesMixin, str, Enum):
    """Service request status.

    Conventional order is pending -> confirmed -> in_progress -> completed,
    or cancelled. Transitions are not enforced; any value may be assigned.
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class UserRole(_ValuesMixin, str, Enum):
    """Admin user role. super_admin has no owning tenant."""

    SUPER_ADMIN = "super_admin"
    TENANT_ADMIN = "tenant_admin"
    TENANT_VIEWER = "tenant_viewer"


class HeroLayout(_ValuesMixin, str, Enum):
    """Guest portal hero banner variant."""

    IMAGE = "image"
    SPLIT = "split"
    MINIMAL = "minimal"
