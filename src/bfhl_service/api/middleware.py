"""ASGI middleware for request tracing and body size limits.

Both classes wrap the raw ASGI callables instead of going through
BaseHTTPMiddleware: the size limit has to see the body as it streams in, and
tracing only needs the response start message.
"""

import time
import uuid

import structlog
from fastapi import status
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers, MutableHeaders
from starlette.exceptions import HTTPException
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
TOO_LARGE_MESSAGE = "Request entity too large"


class RequestTracingMiddleware:
    """Tag each HTTP request with a request_id.

    The id is bound into structlog contextvars for every log line emitted
    while the request is handled, stored on request.state, and returned to
    the client in the X-Request-ID header.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = uuid.uuid4().hex
        scope.setdefault("state", {})["request_id"] = request_id
        client = scope.get("client")
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=scope["method"],
            path=scope["path"],
            client_host=client[0] if client else None,
        )

        response_status: int | None = None

        async def send_with_request_id(message: Message) -> None:
            nonlocal response_status
            if message["type"] == "http.response.start":
                response_status = message["status"]
                MutableHeaders(scope=message).append(REQUEST_ID_HEADER, request_id)
            await send(message)

        logger.info("Request started")
        started = time.perf_counter()
        try:
            await self.app(scope, receive, send_with_request_id)
        except Exception:
            logger.exception(
                "Request failed",
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            raise
        else:
            logger.info(
                "Request completed",
                status_code=response_status,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
        finally:
            structlog.contextvars.clear_contextvars()


class BodySizeLimitMiddleware:
    """Enforce max_body_bytes on HTTP request bodies.

    A declared Content-Length over the limit is answered with 413 before the
    app runs. Bodies without one (chunked uploads) are counted as they are
    received; once the running total passes the limit, receive() raises an
    HTTPException(413), which FastAPI lets through its body parsing and the
    app's exception handler renders in the usual error envelope.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int):
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        content_length = Headers(scope=scope).get("content-length", "")
        if content_length.isdigit() and int(content_length) > self.max_body_bytes:
            logger.warning(
                TOO_LARGE_MESSAGE,
                content_length=int(content_length),
                max_body_bytes=self.max_body_bytes,
            )
            response = JSONResponse(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                content={"is_success": False, "error": TOO_LARGE_MESSAGE},
            )
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.max_body_bytes:
                    logger.warning(
                        TOO_LARGE_MESSAGE,
                        received_bytes=received,
                        max_body_bytes=self.max_body_bytes,
                    )
                    raise HTTPException(
                        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                        detail=TOO_LARGE_MESSAGE,
                    )
            return message

        await self.app(scope, limited_receive, send)
