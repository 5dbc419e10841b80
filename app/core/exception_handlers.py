"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and store
exceptions to HTTP responses.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import StayPlusException
from app.infrastructure.exceptions import FirestoreAPIError

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "TENANT_SLUG_TAKEN": 409,
    "VALIDATION_ERROR": 400,
    "DEVELOPMENT_ONLY": 403,
    "SERVICE_UNAVAILABLE": 503,
}

# Map Firestore error code to HTTP status (rejected service credentials: 502)
_STORE_CODE_STATUS: dict[str, int] = {
    "permission-denied": 403,
    "unauthenticated": 502,
    "not-found": 404,
    "already-exists": 409,
    "invalid-argument": 400,
    "resource-exhausted": 503,
    "unavailable": 503,
}


def _stayplus_exception_handler(
    request: Request, exc: StayPlusException
) -> JSONResponse:
    """Return JSON from StayPlusException.to_dict() with appropriate status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    return JSONResponse(
        status_code=status,
        content=exc.to_dict(),
    )


def _store_exception_handler(
    request: Request, exc: FirestoreAPIError
) -> JSONResponse:
    """Return JSON for document store failures; status from the Firestore code."""
    status = _STORE_CODE_STATUS.get(exc.code, 502)
    logger.warning("Store error on %s %s: [%s] %s", request.method, request.url.path, exc.code, exc.message)
    return JSONResponse(
        status_code=status,
        content=exc.to_dict(),
    )


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": jsonable_encoder(exc.errors()),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers are resolved by exception MRO,
    so FirestoreAPIError uses the store-code handler, not its StayPlusException base.
    """
    app.add_exception_handler(FirestoreAPIError, _store_exception_handler)
    app.add_exception_handler(StayPlusException, _stayplus_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
