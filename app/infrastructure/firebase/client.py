"""Firestore client and document store bootstrap.

Initialized at app startup using either FIREBASE_SERVICE_ACCOUNT_KEY (JSON string,
e.g. on Vercel) or FIREBASE_SERVICE_ACCOUNT_PATH (file path). With
DATABASE_BACKEND=memory a process-local client is used instead and no
credentials are needed.
"""

import json
import logging
from pathlib import Path

from app.core.config import Settings, get_settings
from app.infrastructure.firebase._rest_client import (
    FirestoreRESTClient,
    _get_credentials,
)
from app.infrastructure.firebase.document_store import DocumentStore, FirestoreClient
from app.infrastructure.firebase.memory_client import InMemoryFirestoreClient
from app.infrastructure.messaging.listener_errors import get_listener_error_channel

logger = logging.getLogger(__name__)

_firestore_client: FirestoreClient | None = None
_document_store: DocumentStore | None = None


def _load_key_dict(settings: Settings):
    """Return service account dict from env key or file path."""
    key_json = settings.firebase_service_account_key.get_secret_value() if settings.firebase_service_account_key else None
    if key_json:
        try:
            return json.loads(key_json)
        except json.JSONDecodeError as e:
            raise ValueError("FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON") from e
    path = settings.firebase_service_account_path
    if path:
        resolved = Path(path).expanduser().resolve() if not Path(path).is_absolute() else Path(path)
        if not resolved.is_file():
            logger.warning(
                "FIREBASE_SERVICE_ACCOUNT_PATH set but file not found: %s (resolved: %s)",
                path,
                resolved,
            )
            return None
        with open(resolved, encoding="utf-8") as f:
            return json.load(f)
    return None


def init_firebase(settings: Settings | None = None) -> bool:
    """Initialize the Firestore client and the document store on top of it.

    Idempotent if already initialized. On invalid/malformed credentials or any
    initialization error, logs the exception and returns False so the app can
    start (store-backed endpoints then answer 503).

    Returns:
        True if a store is available, False on error.
    """
    global _firestore_client, _document_store
    if _document_store is not None:
        return True
    settings = settings or get_settings()
    try:
        if settings.database_backend == "memory":
            _firestore_client = InMemoryFirestoreClient()
            logger.info("Using in-memory document store")
        else:
            key_dict = _load_key_dict(settings)
            if not key_dict:
                return False

            project_id = key_dict.get("project_id")
            if not project_id:
                logger.error("Firebase service account JSON missing 'project_id'")
                return False

            cred = _get_credentials(key_dict)
            _firestore_client = FirestoreRESTClient(
                project_id,
                cred,
                poll_interval=settings.firestore_poll_interval_seconds,
                timeout=settings.firestore_http_timeout_seconds,
            )
            logger.info("Firestore REST client initialized for project %s", project_id)
        _document_store = DocumentStore(_firestore_client, get_listener_error_channel())
        return True
    except Exception:
        logger.exception("Firebase initialization failed")
        _firestore_client = None
        return False


def get_firestore_client() -> FirestoreClient | None:
    """Return the Firestore client, or None if not configured.

    Same fluent API for both backends (all I/O async):
    - await db.collection(name).document(id).set(data) / update(data) / get() / delete()
    - db.collection(name).where(field, op, value).order_by(field).limit(n)
    - async for doc in query.stream(); query.on_snapshot(callback, on_error)
    - await db.batch_write([...])
    """
    return _firestore_client


def get_document_store() -> DocumentStore | None:
    """Return the shared DocumentStore, or None if the store is not configured."""
    return _document_store


def set_document_store(store: DocumentStore | None) -> None:
    """Replace the shared DocumentStore (tests)."""
    global _document_store, _firestore_client
    _document_store = store
    _firestore_client = store.client if store is not None else None


async def close_firebase() -> None:
    """Close the Firestore client's HTTP connection pool. Call from app shutdown."""
    global _firestore_client, _document_store
    if _firestore_client is not None:
        await _firestore_client.aclose()
        _firestore_client = None
        _document_store = None
        logger.info("Firestore client closed")
