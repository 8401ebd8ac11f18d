"""
Translation of every raised error into the uniform {data, error} envelope.

Precedence: request validation (400), oversized body (413), rate limit (429),
then the error's own status code, defaulting to 500. Messages of 5xx errors
are replaced by a generic one so internals never reach the caller.
"""
import logging
from collections import defaultdict
from typing import Any, Dict, List, Optional, Tuple

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.ai.base import ProviderError

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "VALIDATION_ERROR"
UNAUTHORIZED = "UNAUTHORIZED"
PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
REQUEST_ERROR = "REQUEST_ERROR"
INTERNAL_ERROR = "INTERNAL_ERROR"

GENERIC_SERVER_MESSAGE = "An internal server error occurred."
PAYLOAD_TOO_LARGE_MESSAGE = "Request body exceeds maximum allowed size."
RATE_LIMIT_WINDOW = "1 minute"


class ApiError(Exception):
    """An error that already knows its status code and error code."""

    status_code = 500
    code = INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.details = details


class UnauthorizedError(ApiError):
    status_code = 401
    code = UNAUTHORIZED


def error_body(code: str, message: str, details: Any = None) -> Dict[str, Any]:
    """Build the failure envelope. details is omitted when there are none."""
    error: Dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"data": None, "error": error}


def validation_details(exc: RequestValidationError) -> Dict[str, List[str]]:
    """Map dotted field paths (without the leading 'body') to their messages."""
    details = defaultdict(list)
    for item in exc.errors():
        loc = list(item.get("loc") or ())
        if item.get("type") == "json_invalid":
            path = "body"
        elif loc and loc[0] in ("body", "query", "path", "header"):
            path = ".".join(str(part) for part in loc[1:]) or str(loc[0])
        else:
            path = ".".join(str(part) for part in loc) or "body"
        details[path].append(item.get("msg", "Invalid value"))
    return dict(details)


def rate_limit_message(limit: int) -> str:
    return (
        f"Rate limit exceeded. Max {limit} requests per {RATE_LIMIT_WINDOW}. "
        f"Please retry after {RATE_LIMIT_WINDOW}."
    )


def map_exception(exc: Exception, rate_limit_per_minute: int) -> Tuple[int, Dict[str, Any]]:
    """
    Convert any exception into (status_code, envelope body).

    Args:
        exc: The raised exception
        rate_limit_per_minute: Configured limit, quoted in rate-limit messages

    Returns:
        Tuple of HTTP status code and JSON-serializable body
    """
    if isinstance(exc, RequestValidationError):
        return 400, error_body(VALIDATION_ERROR, "Request validation failed.", validation_details(exc))

    status_code = getattr(exc, "status_code", None) or 500

    if status_code == 413:
        return 413, error_body(PAYLOAD_TOO_LARGE, PAYLOAD_TOO_LARGE_MESSAGE)

    if isinstance(exc, RateLimitExceeded) or status_code == 429:
        return 429, error_body(RATE_LIMIT_EXCEEDED, rate_limit_message(rate_limit_per_minute))

    if isinstance(exc, ApiError):
        message = exc.message if exc.status_code < 500 else GENERIC_SERVER_MESSAGE
        return exc.status_code, error_body(exc.code, message, exc.details)

    if status_code >= 500:
        return status_code, error_body(INTERNAL_ERROR, GENERIC_SERVER_MESSAGE)

    if isinstance(exc, StarletteHTTPException):
        message = str(exc.detail)
    else:
        message = str(exc)
    return status_code, error_body(REQUEST_ERROR, message)


def handle_exception(request: Request, exc: Exception) -> JSONResponse:
    """
    Exception handler installed for every error type.

    Kept synchronous: slowapi's middleware invokes the RateLimitExceeded
    handler directly without awaiting it.
    """
    context = getattr(request.app.state, "context", None)
    limit = context.config.rate_limit_per_minute if context is not None else 0
    status_code, body = map_exception(exc, limit)

    request_id = getattr(request.state, "request_id", None)
    if status_code >= 500:
        logger.error(
            f"Request error [{request_id}] {request.method} {request.url.path}: {exc!r}",
            exc_info=(type(exc), exc, exc.__traceback__),
        )
    else:
        logger.warning(f"Request error [{request_id}] {request.method} {request.url.path}: {status_code} {exc}")

    response = JSONResponse(status_code=status_code, content=body)

    if isinstance(exc, RateLimitExceeded):
        limiter = getattr(request.app.state, "limiter", None)
        view_rate_limit = getattr(request.state, "view_rate_limit", None)
        if limiter is not None and view_rate_limit is not None:
            response = limiter._inject_headers(response, view_rate_limit)

    return response


def register_error_handlers(app: FastAPI) -> None:
    """Route every error type through handle_exception."""
    for exc_class in (
        RequestValidationError,
        RateLimitExceeded,
        StarletteHTTPException,
        ApiError,
        ProviderError,
        Exception,
    ):
        app.add_exception_handler(exc_class, handle_exception)
