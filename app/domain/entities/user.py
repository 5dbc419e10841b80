"""Admin user entity. Authentication is mocked; no users collection is read or written."""

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import UserRole


@dataclass
class User:
    """Admin account. tenant_id is None for super_admin."""

    id: str
    email: str
    role: UserRole
    display_name: str | None = None
    photo_url: str | None = None
    tenant_id: str | None = None
    active: bool = True
    created_at: datetime | None = None
    last_login_at: datetime | None = None

    def can_manage_tenant(self, tenant_id: str) -> bool:
        """Whether this role may mutate the given tenant's data (not enforced anywhere yet)."""
        if not self.active:
            return False
        if self.role == UserRole.SUPER_ADMIN:
            return True
        return self.role == UserRole.TENANT_ADMIN and self.tenant_id == tenant_id
