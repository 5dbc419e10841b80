"""Service request and dashboard API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.enums import RequestStatus
from app.schemas.common import I18nTextSchema


class RequestStatusUpdate(BaseModel):
    """Request body for PATCH /requests/{id}/status. Any status may follow any other."""

    status: RequestStatus


class ServiceRequestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    tenant_id: str
    service_id: str
    service_name: I18nTextSchema
    category_id: str
    guest_name: str
    guest_email: str | None = None
    guest_phone: str | None = None
    status: RequestStatus
    selected_tier: str | None = None
    selected_tier_label: I18nTextSchema | None = None
    quantity: int | None = None
    date: datetime | None = None
    time: str | None = None
    notes: str | None = None
    price: float | None = None
    currency: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PopularServiceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    service_id: str
    service_name: str
    count: int


class DashboardStatsResponse(BaseModel):
    """Response for GET /requests/stats."""

    model_config = ConfigDict(from_attributes=True)

    total_requests: int = Field(..., description="All requests in scope")
    pending_requests: int
    completed_requests: int
    requests_this_week: int = Field(..., description="Created in the last 7 days")
    requests_this_month: int = Field(..., description="Created in the current calendar month (UTC)")
    popular_services: list[PopularServiceResponse]
