"""Request context middleware.

Every request to the board runs inside its own logging context: a request
ID (taken from ``X-Request-ID`` or generated), plus trace and correlation
IDs when the caller sends them. The request ID is echoed back so browser
bug reports can be matched to gateway and upstream log lines.
"""

import re
import time
from collections.abc import Awaitable, Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from ponhub.core.context import (
    clear_context,
    set_correlation_id,
    set_request_id,
    set_trace_id,
)


logger = structlog.get_logger(__name__)

# W3C traceparent: version-traceid-parentid-flags
_TRACEPARENT = re.compile(r"^[0-9a-f]{2}-([0-9a-f]{32})-[0-9a-f]{16}-[0-9a-f]{2}$")


def parse_traceparent(value: str | None) -> str | None:
    """Return the trace ID of a W3C ``traceparent`` header, if well formed."""
    if not value:
        return None
    match = _TRACEPARENT.match(value.strip().lower())
    return match.group(1) if match else None


def client_address(request: Request) -> str | None:
    """Best guess at the caller's address behind a reverse proxy."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.headers.get("x-real-ip") or (
        request.client.host if request.client else None
    )


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind request IDs for logging and write one access log per request."""

    REQUEST_ID_HEADER = "X-Request-ID"

    def __init__(
        self,
        app: ASGIApp,
        log_requests: bool = True,
        exclude_paths: list[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.log_requests = log_requests
        self.exclude_paths = tuple(exclude_paths or ["/health"])

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = self._bind_context(request)
        logged = self.log_requests and not request.url.path.startswith(
            self.exclude_paths
        )
        started = time.perf_counter()

        if logged:
            logger.info(
                "request_started",
                method=request.method,
                path=request.url.path,
                client_ip=client_address(request),
            )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(
                "request_failed",
                method=request.method,
                path=request.url.path,
                error_type=type(e).__name__,
                duration_ms=self._elapsed_ms(started),
            )
            raise
        finally:
            clear_context()

        if logged:
            # 4xx/5xx from the gateway usually mean the upstream misbehaved
            log = logger.warning if response.status_code >= 400 else logger.info
            log(
                "request_completed",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=self._elapsed_ms(started),
                request_id=request_id,
            )

        response.headers[self.REQUEST_ID_HEADER] = request_id
        return response

    def _bind_context(self, request: Request) -> str:
        headers = request.headers
        request_id = set_request_id(headers.get(self.REQUEST_ID_HEADER))
        request.state.request_id = request_id

        trace_id = headers.get("x-trace-id") or parse_traceparent(
            headers.get("traceparent")
        )
        if trace_id:
            set_trace_id(trace_id)
        correlation_id = headers.get("x-correlation-id")
        if correlation_id:
            set_correlation_id(correlation_id)
        return request_id

    @staticmethod
    def _elapsed_ms(started: float) -> float:
        return round((time.perf_counter() - started) * 1000, 2)


__all__ = ["RequestContextMiddleware", "client_address", "parse_traceparent"]
