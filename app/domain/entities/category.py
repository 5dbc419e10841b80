"""Service category entity (global taxonomy, not owned by a tenant)."""

from dataclasses import dataclass

from app.domain.value_objects.core import I18nText


@dataclass
class ServiceCategory:
    """Category shared by all tenants; services reference it by id.

    icon is a presentation key (e.g. 'car', 'gift') mapped to a glyph by the UI.
    """

    id: str
    name: I18nText
    icon: str
    order: int = 0
    active: bool = True
    description: I18nText | None = None
    color: str | None = None
