"""
Centralized error handlers for FastAPI.

Every failure raised while handling a request ends up here and is turned
into exactly one JSON response of the form {"message": str}.

Two stages run in a fixed order:
    1. bad_request_handler: request validation failures, domain validation
       failures and anything declaring status 400 become a 400 response.
       Other failures are forwarded.
    2. generic_error_handler: the failure's declared status, or 500, with
       the failure's own message or a default text.

Stack traces are logged, never sent to clients.
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from products_api.domain.products.errors import ErrorKind, ProductsDomainError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500

DEFAULT_ERROR_MESSAGE = "Internal server error"


def _error_response(
    status_code: int, message: str, headers: Optional[dict[str, str]] = None
) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(
        status_code=status_code, content={"message": message}, headers=headers
    )


def _format_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Flatten pydantic error details into one readable line."""
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


def declared_status(exc: Exception) -> Optional[int]:
    """Return the HTTP status a failure declares about itself, if any."""
    if isinstance(exc, StarletteHTTPException):
        return exc.status_code
    status = getattr(exc, "status", None)
    return status if isinstance(status, int) else None


def error_message(exc: Exception) -> Optional[str]:
    """Return the human readable message carried by a failure, if any."""
    if isinstance(exc, (RequestValidationError, ValidationError)):
        return _format_validation_errors(list(exc.errors()))
    if isinstance(exc, ProductsDomainError):
        return exc.message
    if isinstance(exc, StarletteHTTPException):
        return exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return str(exc) or None


def is_bad_input(exc: Exception) -> bool:
    """Tell whether a failure was caused by the client's input.

    Only request validation and domain errors of the validation kind count.
    Any other pydantic ValidationError is a server-side fault.
    """
    if isinstance(exc, RequestValidationError):
        return True
    if isinstance(exc, ProductsDomainError) and exc.kind is ErrorKind.VALIDATION:
        return True
    return declared_status(exc) == HTTP_400


def bad_request_handler(exc: Exception) -> Optional[JSONResponse]:
    """Stage 1: answer 400 for bad input, otherwise forward (None).

    Args:
        exc: The failure raised while handling the request.

    Returns:
        A 400 response, or None when the failure is not bad input.
    """
    if is_bad_input(exc):
        message = error_message(exc) or "Bad request"
        logger.warning("Bad request: %s", message)
        return _error_response(HTTP_400, message)
    return None


def generic_error_handler(exc: Exception) -> JSONResponse:
    """Stage 2: answer with the declared status, or 500.

    Failures that declare no status are treated as unexpected and logged
    with their traceback. The body carries the failure's own message, or
    the default text when it has none.
    """
    status = declared_status(exc)
    message = error_message(exc) or DEFAULT_ERROR_MESSAGE
    if status is None:
        logger.error("Unexpected error: %s", type(exc).__name__, exc_info=exc)
        return _error_response(HTTP_500, message)

    if status >= HTTP_500:
        logger.error("Request failed with status %d: %s", status, message)
    else:
        logger.warning("Request failed with status %d: %s", status, message)
    return _error_response(status, message, headers=getattr(exc, "headers", None))


def translate_error(exc: Exception) -> JSONResponse:
    """Run the handler chain. A failure handled by stage 1 stops there."""
    response = bad_request_handler(exc)
    if response is not None:
        return response
    return generic_error_handler(exc)


async def handle_error(_request: Request, exc: Exception) -> JSONResponse:
    """FastAPI exception handler entry point for the chain."""
    return translate_error(exc)


def handle_rate_limit_exceeded(_request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Sync entry point; slowapi's middleware calls this handler directly."""
    return translate_error(exc)


def register_error_handlers(app: FastAPI) -> None:
    """Register the error translation chain on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(RequestValidationError, handle_error)
    app.add_exception_handler(StarletteHTTPException, handle_error)
    app.add_exception_handler(ProductsDomainError, handle_error)
    app.add_exception_handler(RateLimitExceeded, handle_rate_limit_exceeded)
    app.add_exception_handler(Exception, handle_error)
