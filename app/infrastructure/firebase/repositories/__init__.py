"""Firestore-backed repository implementations (one per collection)."""

from app.infrastructure.firebase.repositories.category_repo_firestore import (
    FirestoreCategoryRepository,
)
from app.infrastructure.firebase.repositories.request_repo_firestore import (
    FirestoreServiceRequestRepository,
)
from app.infrastructure.firebase.repositories.service_repo_firestore import (
    FirestoreServiceRepository,
)
from app.infrastructure.firebase.repositories.tenant_repo_firestore import (
    FirestoreTenantRepository,
)

__all__ = [
    "FirestoreCategoryRepository",
    "FirestoreServiceRepository",
    "FirestoreServiceRequestRepository",
    "FirestoreTenantRepository",
]
