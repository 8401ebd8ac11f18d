"""Transport-level middleware: request ids, access logging and body size limits."""
import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from .errors import PAYLOAD_TOO_LARGE, PAYLOAD_TOO_LARGE_MESSAGE, error_body, handle_exception

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def generate_request_id() -> str:
    return str(uuid.uuid4())


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Echo the caller's X-Request-ID (or generate one) and log each request."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or generate_request_id()
        request.state.request_id = request_id

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            # Errors no handler took; answered here so they still carry the id
            response = handle_exception(request, exc)
        duration_ms = (time.perf_counter() - started) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"({duration_ms:.1f}ms) [{request_id}]"
        )
        return response


class BodyTooLarge(Exception):
    """Raised from the wrapped receive once a streamed body passes the limit."""


class BodySizeLimitMiddleware:
    """
    Reject request bodies larger than max_body_size bytes.

    A declared Content-Length over the limit is answered with 413 before the
    app runs. Bodies without a usable Content-Length are counted as they are
    read; once over the limit, whatever the app answers is discarded and the
    same 413 is sent instead, provided no response has started yet.
    """

    def __init__(self, app: ASGIApp, max_body_size: int):
        self.app = app
        self.max_body_size = max_body_size

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        declared = self._content_length(scope)
        if declared is not None and declared > self.max_body_size:
            logger.warning(f"Rejected body of {declared} bytes (limit {self.max_body_size})")
            await self._reject(scope, receive, send)
            return

        received = 0
        exceeded = False
        response_started = False

        async def limited_receive() -> Message:
            nonlocal received, exceeded
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_size:
                    exceeded = True
                    raise BodyTooLarge()
            return message

        async def guarded_send(message: Message) -> None:
            nonlocal response_started
            # The app's own answer to the aborted read is dropped
            if exceeded and not response_started:
                return
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, limited_receive, guarded_send)
        except BodyTooLarge:
            pass

        if exceeded and not response_started:
            logger.warning(f"Rejected streamed body over {self.max_body_size} bytes")
            await self._reject(scope, receive, send)

    @staticmethod
    async def _reject(scope: Scope, receive: Receive, send: Send) -> None:
        response = JSONResponse(status_code=413, content=error_body(PAYLOAD_TOO_LARGE, PAYLOAD_TOO_LARGE_MESSAGE))
        await response(scope, receive, send)

    @staticmethod
    def _content_length(scope: Scope):
        for name, value in scope.get("headers", []):
            if name == b"content-length":
                try:
                    return int(value)
                except ValueError:
                    return None
        return None
