"""Guest portal API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.application.dtos import GuestRequestForm
from app.schemas.category import CategoryResponse
from app.schemas.service import ServiceResponse
from app.schemas.tenant import TenantResponse


class GuestPortalResponse(BaseModel):
    """Response for GET /portal/{slug}: active offer of one tenant."""

    model_config = ConfigDict(from_attributes=True)

    tenant: TenantResponse
    services: list[ServiceResponse]
    categories: list[CategoryResponse] = Field(..., description="Categories with at least one active service")
    featured: list[ServiceResponse]


class GuestRequestCreate(BaseModel):
    """Request body for POST /portal/{slug}/requests."""

    service_id: str = Field(..., min_length=1)
    guest_name: str = Field(..., min_length=1, max_length=200)
    guest_email: EmailStr | None = None
    guest_phone: str | None = Field(default=None, max_length=40)
    selected_tier: str | None = None
    quantity: int | None = Field(default=None, ge=1, le=100)
    date: datetime | None = None
    time: str | None = Field(default=None, max_length=20)
    notes: str | None = Field(default=None, max_length=2000)

    def to_form(self) -> GuestRequestForm:
        return GuestRequestForm(**self.model_dump(exclude={"service_id"}))
