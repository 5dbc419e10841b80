"""Service request entity: one per guest booking attempt."""

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import RequestStatus
from app.domain.value_objects.core import I18nText


@dataclass
class ServiceRequest:
    """Guest submission against one service of one tenant.

    service_name, price and currency are a point-in-time snapshot taken at
    submission; later edits to the service do not change them.
    """

    id: str
    tenant_id: str
    service_id: str
    service_name: I18nText
    category_id: str
    guest_name: str
    currency: str = "EUR"
    status: RequestStatus = RequestStatus.PENDING
    guest_email: str | None = None
    guest_phone: str | None = None
    selected_tier: str | None = None
    selected_tier_label: I18nText | None = None
    quantity: int | None = None
    date: datetime | None = None
    time: str | None = None
    notes: str | None = None
    price: float | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
