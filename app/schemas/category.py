"""Service category API schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain.entities import ServiceCategory
from app.schemas.common import I18nTextSchema, build_patch, i18n_or_none
from app.shared.utils.sanitization import validate_identifier


class CategoryCreate(BaseModel):
    """Request body for POST /categories. id is optional; a CUID is assigned when omitted."""

    id: str | None = Field(default=None, min_length=1, max_length=100)
    name: I18nTextSchema
    icon: str = Field(..., min_length=1, description="Presentation key, e.g. 'car'")
    order: int = 0
    active: bool = True
    description: I18nTextSchema | None = None
    color: str | None = None

    @field_validator("id")
    @classmethod
    def check_id(cls, v: str | None) -> str | None:
        return validate_identifier(v) if v is not None else None

    def to_entity(self) -> ServiceCategory:
        return ServiceCategory(
            id=self.id or "",
            name=self.name.to_value(),
            icon=self.icon,
            order=self.order,
            active=self.active,
            description=i18n_or_none(self.description),
            color=self.color,
        )


class CategoryUpdate(BaseModel):
    name: I18nTextSchema | None = None
    icon: str | None = Field(default=None, min_length=1)
    order: int | None = None
    active: bool | None = None
    description: I18nTextSchema | None = None
    color: str | None = None

    def to_patch(self) -> dict[str, Any]:
        return build_patch(self, nullable=("description", "color"))


class CategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: I18nTextSchema
    icon: str
    order: int
    active: bool
    description: I18nTextSchema | None = None
    color: str | None = None
