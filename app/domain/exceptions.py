"""Domain exceptions for the StayPlus application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class StayPlusException(Exception):
    """Base exception for all StayPlus application errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(StayPlusException):
    """Raised when input validation fails (e.g. unknown tier, bad status)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(StayPlusException):
    """Raised when a requested resource is not found and the caller needs an error."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'tenant', 'service').
            resource_id: The ID (or slug) that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class TenantSlugTakenException(StayPlusException):
    """Raised when creating or renaming a tenant to a slug another tenant already uses."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            f"Tenant with slug '{slug}' already exists",
            "TENANT_SLUG_TAKEN",
            {"slug": slug},
        )


class DevelopmentOnlyException(StayPlusException):
    """Raised when a development-only operation (seed, reset) is invoked outside development mode."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"'{operation}' is only available in development mode",
            "DEVELOPMENT_ONLY",
            {"operation": operation},
        )


class StoreNotConfiguredException(StayPlusException):
    """Raised when the document store has not been initialized (no credentials / startup failed)."""

    def __init__(self) -> None:
        super().__init__(
            message="The document store is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
