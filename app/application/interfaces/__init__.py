"""Application interfaces (ports). Infrastructure implements these (DIP)."""

from app.application.interfaces.repositories import (
    ICategoryRepository,
    IServiceRepository,
    IServiceRequestRepository,
    ITenantRepository,
    Unsubscribe,
)
from app.application.interfaces.services import IListenerError, IListenerErrorChannel

__all__ = [
    "ICategoryRepository",
    "IListenerError",
    "IListenerErrorChannel",
    "IServiceRepository",
    "IServiceRequestRepository",
    "ITenantRepository",
    "Unsubscribe",
]
