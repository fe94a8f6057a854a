"""Request logging middleware.

Logs one line per HTTP request: method, path, status, duration and request id.
Uses raw ASGI (no BaseHTTPMiddleware) for production-safe streaming and background tasks.
Place inside RequestIDMiddleware so the request id is already on the scope.
"""

import logging
import time
from typing import Callable

logger = logging.getLogger("app.requests")


def RequestLoggingMiddleware(app: Callable) -> Callable:
    """Log method, path, status and duration of every request. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        start = time.perf_counter()
        status_code = 500

        async def send_wrapper(message: dict) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            request_id = scope.get("state", {}).get("request_id", "-")
            logger.info(
                "%s %s %s %.1fms request_id=%s",
                scope.get("method", ""),
                scope.get("path", ""),
                status_code,
                duration_ms,
                request_id,
            )

    return asgi_app
