"""Firestore integration: REST and in-memory clients, document store, repositories."""

from app.infrastructure.firebase.client import (
    close_firebase,
    get_document_store,
    get_firestore_client,
    init_firebase,
    set_document_store,
)
from app.infrastructure.firebase.document_store import DocumentStore
from app.infrastructure.firebase.query import ASCENDING, DESCENDING, FieldFilter, OrderBy

__all__ = [
    "ASCENDING",
    "DESCENDING",
    "DocumentStore",
    "FieldFilter",
    "OrderBy",
    "close_firebase",
    "get_document_store",
    "get_firestore_client",
    "init_firebase",
    "set_document_store",
]
