"""
Error Handling Utilities
Provides sanitized error messages and consistent error responses.
"""

import logging
from enum import Enum

from fastapi import HTTPException, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.exceptions import MetricsUnavailableError

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    """Error codes for frontend handling."""

    # Metrics gathering errors
    METRICS_UNAVAILABLE = "metrics_unavailable"

    # General errors
    INTERNAL_ERROR = "internal_error"


# User-friendly error messages
ERROR_MESSAGES = {
    ErrorCode.METRICS_UNAVAILABLE: "Unable to load your shop metrics. Please try again in a moment.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again later.",
}


def sanitize_error_message(
    exception: Exception,
    error_code: ErrorCode,
    log_details: bool = True,
) -> str:
    """
    Sanitize error message for user-facing responses.

    Logs full exception details internally but returns user-friendly message.

    Args:
        exception: The exception that occurred
        error_code: Error code for categorization
        log_details: Whether to log full exception details

    Returns:
        User-friendly error message
    """
    if log_details:
        logger.error(
            "Error [%s]: %s",
            error_code.value,
            str(exception),
            exc_info=exception,
        )

    return ERROR_MESSAGES.get(error_code, ERROR_MESSAGES[ErrorCode.INTERNAL_ERROR])


def get_error_code_for_exception(exception: Exception) -> tuple[ErrorCode, int]:
    """
    Map exception types to error codes and HTTP status codes.

    Args:
        exception: The exception that occurred

    Returns:
        Tuple of (error_code, http_status_code)
    """
    if isinstance(exception, MetricsUnavailableError):
        return ErrorCode.METRICS_UNAVAILABLE, status.HTTP_502_BAD_GATEWAY

    # Default to internal error
    return ErrorCode.INTERNAL_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR


async def global_exception_handler(_request, exc: Exception) -> JSONResponse:
    """
    Global exception handler for FastAPI.

    Catches all unhandled exceptions and returns sanitized error responses.
    Excludes HTTPException (intentional responses) and ValidationError (FastAPI validation).
    """
    # Don't handle HTTPException - those are intentional responses
    if isinstance(exc, HTTPException):
        raise exc

    # Don't handle RequestValidationError - FastAPI handles this
    if isinstance(exc, RequestValidationError):
        raise exc

    error_code, http_status = get_error_code_for_exception(exc)
    message = sanitize_error_message(exc, error_code)

    return JSONResponse(
        status_code=http_status,
        content={
            "error_code": error_code.value,
            "message": message,
        },
    )
