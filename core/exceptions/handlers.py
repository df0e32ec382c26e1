"""Global exception handlers for the review service."""

import logging
import traceback
from datetime import UTC, datetime
from typing import Any

from django.conf import settings

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.exceptions.review_exceptions import ReviewServiceError, StoreFailureError
from core.logging.context import get_request_id

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal server error occurred."


def custom_exception_handler(
    exc: Exception, context: dict[str, Any]
) -> Response | None:
    """Custom exception handler for Django REST Framework.

    DRF's own exceptions (authentication, parsing, method not allowed,
    Http404) keep DRF's response. Review service errors answer with the
    status code they carry, and anything else becomes an opaque 500.
    Error bodies have the shape {status, message, request_id, timestamp};
    store failures add error="store_failure".

    Args:
        exc: The exception that was raised.
        context: Context dictionary containing request and view information.

    Returns:
        A Response object with the error details.
    """
    view = context.get("view")
    request = view.request if view else None
    request_id = get_request_id()

    response = exception_handler(exc, context)

    if response is None:
        if isinstance(exc, ReviewServiceError):
            status_code = exc.status_code or status.HTTP_500_INTERNAL_SERVER_ERROR
            response_data = _create_error_response(status_code, str(exc), request_id)
            if isinstance(exc, StoreFailureError):
                response_data["error"] = "store_failure"
        else:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
            response_data = _create_error_response(
                status_code, INTERNAL_ERROR_MESSAGE, request_id
            )
        response = Response(response_data, status=status_code)

    if request_id:
        response["X-Request-ID"] = request_id

    _log_exception(exc, request, response)

    return response


def _create_error_response(
    status_code: int, message: str, request_id: str | None
) -> dict[str, Any]:
    """Create a standardized error response.

    Args:
        status_code: The HTTP status code.
        message: The error message to return to the client.
        request_id: The request ID for tracing.

    Returns:
        Dictionary with standard error response format.
    """
    return {
        "status": status_code,
        "message": message,
        "request_id": request_id,
        "timestamp": datetime.now(UTC).isoformat(),
    }


def _log_exception(
    exc: Exception,
    request: Any,
    response: Response | None,
) -> None:
    """Log exception details; client errors as warnings, the rest as errors.

    Stack traces are only attached in DEBUG mode.
    """
    status_code = response.status_code if response else 500
    log_level = logging.WARNING if 400 <= status_code < 500 else logging.ERROR

    request_path = request.path if request else "unknown"
    request_method = request.method if request else "unknown"

    log_message = (
        f"Exception occurred: {type(exc).__name__}: {exc} | "
        f"Path: {request_method} {request_path} | "
        f"Status: {status_code}"
    )

    if settings.DEBUG:
        stack_trace = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
        log_message += f"\nStack trace:\n{stack_trace}"

    logger.log(log_level, log_message)
