"""Domain value objects for the StayPlus application.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from app.domain.enums import Locale

# Shared slug pattern: lowercase alphanumeric with optional hyphens (e.g. sunny-sarajevo).
_SLUG_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


@dataclass(frozen=True)
class I18nText:
    """Bilingual text (English / Bosnian). Missing translations fall back to English."""

    en: str
    bs: str = ""

    def get(self, locale: Locale | str = Locale.EN) -> str:
        """Return the text for locale, or English when that translation is empty."""
        value = self.bs if Locale(locale) == Locale.BS else self.en
        return value or self.en or ""

    def to_dict(self) -> dict[str, str]:
        return {"en": self.en, "bs": self.bs}

    @classmethod
    def from_value(cls, value: Any) -> I18nText | None:
        """Build from a stored map; a plain string is used for both languages."""
        if value is None:
            return None
        if isinstance(value, I18nText):
            return value
        if isinstance(value, str):
            return cls(en=value, bs=value)
        if not isinstance(value, Mapping):
            return None
        return cls(en=str(value.get("en") or ""), bs=str(value.get("bs") or ""))


@dataclass(frozen=True)
class TenantSlug:
    """Value object for tenant slug (public portal routing key).

    Slugs are 1-100 characters, lowercase alphanumeric with optional
    single hyphens. Lookup by slug is exact and case-sensitive.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Tenant slug must be a non-empty string")
        if len(self.value) > 100:
            raise ValueError("Tenant slug must be at most 100 characters")
        if not _SLUG_RE.match(self.value):
            raise ValueError(
                "Tenant slug must be lowercase alphanumeric with optional hyphens "
                "(e.g., 'acme', 'sunny-sarajevo')"
            )

    def __str__(self) -> str:
        return self.value
