"""Infrastructure exceptions for document store operations.

Each error carries a Firestore-style ``code`` (e.g. 'permission-denied')
so one-shot callers and the listener error channel report the same value.
They extend StayPlusException so presentation can map them to HTTP
responses consistently.
"""

from app.domain.exceptions import StayPlusException


class FirestoreAPIError(StayPlusException):
    """Base exception for document store failures."""

    code: str = "unknown"

    def __init__(self, message: str, code: str | None = None) -> None:
        if code is not None:
            self.code = code
        super().__init__(message, "STORE_ERROR", {"code": self.code})


class PermissionDeniedError(FirestoreAPIError):
    """The store rejected the operation under its access rules."""

    code = "permission-denied"

    def __init__(self, message: str = "Missing or insufficient permissions.") -> None:
        super().__init__(message)


class UnauthenticatedError(FirestoreAPIError):
    """Credentials missing or expired."""

    code = "unauthenticated"

    def __init__(self, message: str = "Request is not authenticated.") -> None:
        super().__init__(message)


class DocumentNotFoundError(FirestoreAPIError):
    """Update targeted a document that does not exist."""

    code = "not-found"

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"No document to update: {path}")


class DocumentExistsError(FirestoreAPIError):
    """Create targeted a document id that already exists."""

    code = "already-exists"

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Document already exists: {path}")


class ResourceExhaustedError(FirestoreAPIError):
    """Quota or rate limit exceeded."""

    code = "resource-exhausted"

    def __init__(self, message: str = "Quota exceeded.") -> None:
        super().__init__(message)


class UnavailableError(FirestoreAPIError):
    """Transient network or service failure."""

    code = "unavailable"

    def __init__(self, message: str = "The service is currently unavailable.") -> None:
        super().__init__(message)
