"""Global error handling to map domain errors and hide internals."""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from hris_api.config import get_settings
from hris_api.exceptions import (
    ConflictError,
    ConstraintViolationError,
    HrisAPIError,
    NotFoundError,
    ValidationError,
)
from hris_api.utils.secure_logging import log_error

logger = logging.getLogger(__name__)

# Safe error messages that can be shown to users
SAFE_ERROR_MESSAGES = {
    400: "Invalid request",
    404: "Resource not found",
    405: "Method not allowed",
    409: "Conflict with existing resource",
    422: "Invalid input data",
    500: "Internal server error",
    503: "Service temporarily unavailable",
}


STATUS_CODES: list[tuple[type[HrisAPIError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ConstraintViolationError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
]


def status_code_for(exc: HrisAPIError) -> int:
    """HTTP status code for a domain error."""
    for error_type, status_code in STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def sanitize_validation_errors(errors: list[Any]) -> str:
    """Reduce pydantic errors to 'field: message' pairs.

    Args:
        errors: Errors from RequestValidationError.errors()

    Returns:
        Safe error message
    """
    safe_errors = []
    for error in errors:
        if isinstance(error, dict):
            loc = error.get("loc", [])
            msg = error.get("msg", "Invalid value")
            field = loc[-1] if loc else "field"
            if isinstance(field, (str, int)) and not str(field).startswith("_"):
                safe_errors.append(f"{field}: {msg}")
    if safe_errors:
        return "; ".join(safe_errors[:3])
    return SAFE_ERROR_MESSAGES[422]


async def hris_exception_handler(request: Request, exc: HrisAPIError) -> JSONResponse:
    """Handle domain errors raised by services.

    Domain messages carry no internals, so they are returned as-is with
    their details.
    """
    status_code = status_code_for(exc)
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": exc.message,
            "error": type(exc).__name__,
            "details": exc.details,
        },
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions, replacing non-string details with a generic message."""
    detail = exc.detail if isinstance(exc.detail, str) else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": detail or SAFE_ERROR_MESSAGES.get(exc.status_code, "Request failed")},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors with sanitized messages."""
    logger.warning(f"Validation error for {request.url.path}: {exc.errors()}")

    if get_settings().debug:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": jsonable_errors(exc.errors())},
        )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": sanitize_validation_errors(exc.errors())},
    )


def jsonable_errors(errors: list[Any]) -> list[dict[str, Any]]:
    """Drop non-serialisable context from pydantic errors."""
    return [
        {"loc": list(e.get("loc", [])), "msg": e.get("msg"), "type": e.get("type")}
        for e in errors
        if isinstance(e, dict)
    ]


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle database errors without leaking database details."""
    log_error(logger, f"Database error for {request.url.path}", exc)

    if isinstance(exc, IntegrityError):
        message = str(exc.orig).lower() if exc.orig else str(exc).lower()
        if "unique" in message or "duplicate" in message:
            return JSONResponse(
                status_code=status.HTTP_409_CONFLICT,
                content={"detail": "Resource already exists"},
            )
        if "foreign key" in message:
            return JSONResponse(
                status_code=status.HTTP_409_CONFLICT,
                content={"detail": "Resource is referenced by other records"},
            )
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": SAFE_ERROR_MESSAGES[409]},
        )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error occurred"},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking information."""
    logger.error(f"Unhandled exception for {request.url.path}: {exc}", exc_info=True)

    if get_settings().debug:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc), "type": type(exc).__name__},
        )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": SAFE_ERROR_MESSAGES[500]},
    )
