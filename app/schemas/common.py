"""Schemas shared by several resources."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.domain.value_objects import I18nText
from app.shared.utils.sanitization import InputSanitizer


class I18nTextSchema(BaseModel):
    """Bilingual text; bs falls back to en when empty."""

    model_config = ConfigDict(from_attributes=True)

    en: str = Field(..., description="English text")
    bs: str = Field(default="", description="Bosnian text")

    def to_value(self) -> I18nText:
        return I18nText(en=self.en, bs=self.bs)


def validate_url(value: str | None) -> str | None:
    """Keep None; anything else must be an absolute http(s) URL."""
    if value is None:
        return None
    url = InputSanitizer.sanitize_url(value)
    if not url:
        raise ValueError("must be an absolute http(s) URL")
    return url


def i18n_or_none(value: I18nTextSchema | None) -> I18nText | None:
    return value.to_value() if value is not None else None


def build_patch(model: BaseModel, nullable: tuple[str, ...] = ()) -> dict[str, Any]:
    """Fields the client actually sent, converted to domain values.

    An explicit null is kept only for fields in ``nullable``; for any other
    field it is ignored.
    """
    patch: dict[str, Any] = {}
    for name in model.model_fields_set:
        value = getattr(model, name)
        if value is None:
            if name in nullable:
                patch[name] = None
            continue
        if isinstance(value, list):
            patch[name] = [v.to_value() if hasattr(v, "to_value") else v for v in value]
        else:
            patch[name] = value.to_value() if hasattr(value, "to_value") else value
    return patch
