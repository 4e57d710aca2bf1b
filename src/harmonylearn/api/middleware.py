"""
HTTP Middleware

Request logging for API calls, request body size limit and, in production,
a per-request timeout.
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable

from fastapi import FastAPI, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from harmonylearn.config import Settings

logger = logging.getLogger("harmonylearn.requests")

MAX_LOG_LINE = 80

CallNext = Callable[[Request], Awaitable[Response]]


def format_request_line(method: str, path: str, status_code: int, duration_ms: int) -> str:
    """``METHOD path status in Nms``, cut to 80 characters."""
    line = f"{method} {path} {status_code} in {duration_ms}ms"
    if len(line) > MAX_LOG_LINE:
        line = line[: MAX_LOG_LINE - 1] + "…"
    return line


def register_middleware(app: FastAPI, settings: Settings) -> None:
    """Install middleware. The last one registered runs first."""
    if settings.is_production:
        _register_timeout(app, settings.request_timeout_seconds)
    app.add_middleware(BodySizeLimitMiddleware, limit=settings.body_limit_bytes)
    _register_request_log(app)


def _register_request_log(app: FastAPI) -> None:
    @app.middleware("http")
    async def log_api_requests(request: Request, call_next: CallNext) -> Response:
        start = time.perf_counter()
        response = await call_next(request)

        path = request.url.path
        if path.startswith("/api"):
            duration_ms = int((time.perf_counter() - start) * 1000)
            logger.info(format_request_line(request.method, path, response.status_code, duration_ms))
        return response


BODY_TOO_LARGE = "Request body too large"


class BodySizeLimitMiddleware:
    """
    Answer 413 for request bodies larger than ``limit`` bytes.

    A declared Content-Length is checked before the app runs. Bodies without
    one (chunked uploads) are counted as they are received and cut off as
    soon as the running total passes the limit.
    """

    def __init__(self, app: ASGIApp, limit: int) -> None:
        self.app = app
        self.limit = limit

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope)
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.limit:
            logger.warning(f"Rejected {request.url.path}: body of {content_length} bytes")
            response = JSONResponse(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                content={"error": BODY_TOO_LARGE},
            )
            await response(scope, receive, send)
            return

        received = 0

        async def limited_receive() -> Message:
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > self.limit:
                    logger.warning(f"Rejected {request.url.path}: body over {self.limit} bytes")
                    # Surfaces through the HTTP error handler while the body is read
                    raise HTTPException(
                        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                        detail=BODY_TOO_LARGE,
                    )
            return message

        await self.app(scope, limited_receive, send)


def _register_timeout(app: FastAPI, seconds: float) -> None:
    @app.middleware("http")
    async def enforce_timeout(request: Request, call_next: CallNext) -> Response:
        try:
            return await asyncio.wait_for(call_next(request), timeout=seconds)
        except TimeoutError:
            logger.error(f"Request timed out after {seconds}s: {request.method} {request.url.path}")
            return JSONResponse(
                status_code=status.HTTP_504_GATEWAY_TIMEOUT,
                content={"error": "Request timeout"},
            )
