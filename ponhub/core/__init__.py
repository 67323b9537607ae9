# Core infrastructure
from ponhub.core.context import (
    clear_context,
    get_context,
    get_correlation_id,
    get_request_id,
    get_trace_id,
    set_correlation_id,
    set_request_id,
    set_trace_id,
)
from ponhub.core.errors import (
    GatewayError,
    UpstreamError,
    ValidationError,
    handle_gateway_error,
)
from ponhub.core.logging import configure_structlog, get_logger
from ponhub.core.middleware import RequestContextMiddleware
from ponhub.core.upstream import (
    UpstreamClient,
    create_upstream_client,
    get_upstream,
    get_upstream_client,
    init_upstream,
    shutdown_upstream,
)


__all__ = [
    "GatewayError",
    "RequestContextMiddleware",
    "UpstreamClient",
    "UpstreamError",
    "ValidationError",
    "clear_context",
    "configure_structlog",
    "create_upstream_client",
    "get_context",
    "get_correlation_id",
    "get_logger",
    "get_request_id",
    "get_trace_id",
    "get_upstream",
    "get_upstream_client",
    "handle_gateway_error",
    "init_upstream",
    "set_correlation_id",
    "set_request_id",
    "set_trace_id",
    "shutdown_upstream",
]
