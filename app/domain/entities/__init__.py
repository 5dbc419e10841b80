"""Domain entities.

Plain data shapes; no persistence concerns. Cross-entity references are by
string id, except ServiceTier which is embedded in Service.
"""

from app.domain.entities.category import ServiceCategory
from app.domain.entities.service import Service, ServiceTier
from app.domain.entities.service_request import ServiceRequest
from app.domain.entities.tenant import Tenant, TenantBranding, TenantContact
from app.domain.entities.user import User

__all__ = [
    "Service",
    "ServiceCategory",
    "ServiceRequest",
    "ServiceTier",
    "Tenant",
    "TenantBranding",
    "TenantContact",
    "User",
]
