"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when you first write a document. Use these constants so collection names
stay consistent between repositories, seeding and listener contexts.

Example:
    from app.infrastructure.firebase.client import get_document_store
    from app.infrastructure.firebase.collections import COLLECTION_TENANTS

    store = get_document_store()
    tenant = await store.get(COLLECTION_TENANTS, tenant_id)
"""

from app.shared.enums import ListenerContext

COLLECTION_TENANTS = "tenants"
COLLECTION_CATEGORIES = "categories"
COLLECTION_SERVICES = "services"
COLLECTION_REQUESTS = "requests"

# Error channel context for each collection that can be subscribed to
COLLECTION_CONTEXTS: dict[str, ListenerContext] = {
    COLLECTION_TENANTS: ListenerContext.TENANTS,
    COLLECTION_CATEGORIES: ListenerContext.CATEGORIES,
    COLLECTION_SERVICES: ListenerContext.SERVICES,
    COLLECTION_REQUESTS: ListenerContext.REQUESTS,
}
