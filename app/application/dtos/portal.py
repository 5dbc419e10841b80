"""DTOs for the guest portal read and submit paths."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from app.domain.entities import Service, ServiceCategory, Tenant


@dataclass
class GuestPortal:
    """Everything the guest portal page renders for one tenant."""

    tenant: Tenant
    services: list[Service]
    categories: list[ServiceCategory]
    featured: list[Service] = field(default_factory=list)


@dataclass
class GuestRequestForm:
    """Guest booking form. Text fields are sanitized before storing."""

    guest_name: str
    guest_email: str | None = None
    guest_phone: str | None = None
    selected_tier: str | None = None
    quantity: int | None = None
    date: datetime | None = None
    time: str | None = None
    notes: str | None = None
