"""
FastAPI exception handlers for structured error responses.

The scoring core has no fatal error path, so only unexpected failures and
invalid input reach these handlers.
"""

from datetime import datetime, timezone

import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

logger = structlog.get_logger(__name__)


async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """
    Handle invalid values that slipped past request validation
    (e.g. an unknown sentiment label).

    Maps to 400 Bad Request. A pydantic ValidationError raised after request
    validation comes from our own models (e.g. a malformed distribution), so
    it is treated as an internal error instead.
    """
    if isinstance(exc, ValidationError):
        return await generic_error_handler(request, exc)

    logger.warning("Invalid request value", error=str(exc))

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "invalid_request",
            "message": str(exc),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.

    Maps to 500 Internal Server Error.
    """
    logger.exception("Unexpected error", error_type=type(exc).__name__)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    ValueError: value_error_handler,
    Exception: generic_error_handler,
}
