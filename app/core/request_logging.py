# File: app/core/request_logging.py

"""
Access logging for the JSON API.

One line per request under the API prefix, with severity chosen from the
response status:

    HTTP GET /api/users/7 - Status: 404 - Duration: 3ms - RequestID: REQ-1718000000000-140234

The request id only correlates log lines; it is never sent to the client.
"""

import logging
import threading
import time
from dataclasses import dataclass, field

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def generate_request_id(started_ms: int) -> str:
    # Millisecond clock + worker thread; two requests on different workers in
    # the same millisecond can still collide.
    return f"REQ-{started_ms}-{threading.get_ident()}"


def level_for_status(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


@dataclass
class RequestLogContext:
    method: str
    path: str
    started_ms: int = field(default_factory=_now_ms)
    request_id: str = ""

    def __post_init__(self):
        if not self.request_id:
            self.request_id = generate_request_id(self.started_ms)

    def duration_ms(self) -> int:
        return _now_ms() - self.started_ms


def log_completion(ctx: RequestLogContext, status_code: int, exc: BaseException | None = None) -> None:
    logger.log(
        level_for_status(status_code),
        "HTTP %s %s - Status: %s - Duration: %sms - RequestID: %s",
        ctx.method,
        ctx.path,
        status_code,
        ctx.duration_ms(),
        ctx.request_id,
    )

    if exc is not None:
        logger.error(
            "Request failed with exception - RequestID: %s - Message: %s",
            ctx.request_id,
            exc,
            exc_info=exc,
        )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs method, path, status and duration for every request whose path
    starts with ``path_prefix``. Other requests pass through untouched.
    """

    def __init__(self, app, path_prefix: str = "/api"):
        super().__init__(app)
        self.path_prefix = path_prefix.rstrip("/") + "/"

    def _should_log(self, path: str) -> bool:
        return path.startswith(self.path_prefix) or path == self.path_prefix.rstrip("/")

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if not self._should_log(path):
            return await call_next(request)

        ctx = RequestLogContext(method=request.method, path=path)

        try:
            response = await call_next(request)
        except Exception as exc:
            log_completion(ctx, 500, exc)
            raise

        log_completion(ctx, response.status_code)
        return response
