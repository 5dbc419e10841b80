"""Application layer: interfaces, live stores, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories, error channel).
"""

from app.application.interfaces import (
    ICategoryRepository,
    IListenerErrorChannel,
    IServiceRepository,
    IServiceRequestRepository,
    ITenantRepository,
)
from app.application.stores import (
    CategoriesStore,
    LiveStore,
    RequestsStore,
    ServicesStore,
    TenantsStore,
)
from app.application.use_cases import (
    GetDashboardStatsUseCase,
    GuestPortalService,
    compute_dashboard_stats,
)

__all__ = [
    "CategoriesStore",
    "GetDashboardStatsUseCase",
    "GuestPortalService",
    "ICategoryRepository",
    "IListenerErrorChannel",
    "IServiceRepository",
    "IServiceRequestRepository",
    "ITenantRepository",
    "LiveStore",
    "RequestsStore",
    "ServicesStore",
    "TenantsStore",
    "compute_dashboard_stats",
]
