"""Tests for request context tracking."""

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from ponhub.core.context import (
    clear_context,
    get_context,
    set_correlation_id,
    set_request_id,
    set_trace_id,
)
from ponhub.core.middleware import (
    RequestContextMiddleware,
    client_address,
    parse_traceparent,
)


def test_set_request_id_generates_when_missing():
    rid = set_request_id(None)

    assert rid
    assert get_context()["request_id"] == rid
    clear_context()


def test_context_contains_only_set_values():
    clear_context()
    set_request_id("req-1")
    set_trace_id("trace-1")

    assert get_context() == {"request_id": "req-1", "trace_id": "trace-1"}

    set_correlation_id("corr-1")
    assert get_context()["correlation_id"] == "corr-1"

    clear_context()
    assert get_context() == {}


def build_echo_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(RequestContextMiddleware, log_requests=False)

    @app.get("/echo")
    async def echo() -> dict:
        return get_context()

    @app.get("/ip")
    async def ip(request: Request) -> dict:
        return {"ip": client_address(request)}

    return app


def test_middleware_exposes_context_to_handlers():
    client = TestClient(build_echo_app())

    response = client.get(
        "/echo",
        headers={
            "X-Request-ID": "req-9",
            "traceparent": "00-0af7651916cd43dd8448eb211c80319c-b7ad6b7169203331-01",
            "X-Correlation-ID": "corr-9",
        },
    )

    assert response.json() == {
        "request_id": "req-9",
        "trace_id": "0af7651916cd43dd8448eb211c80319c",
        "correlation_id": "corr-9",
    }
    assert response.headers["X-Request-ID"] == "req-9"


class TestParseTraceparent:
    def test_valid_header(self):
        value = "00-0AF7651916CD43DD8448EB211C80319C-b7ad6b7169203331-01"

        assert parse_traceparent(value) == "0af7651916cd43dd8448eb211c80319c"

    @pytest.mark.parametrize("value", [None, "", "00-abc-01", "not-a-trace-header"])
    def test_malformed_header(self, value):
        assert parse_traceparent(value) is None


def test_forwarded_for_wins_over_client():
    client = TestClient(build_echo_app())

    response = client.get(
        "/ip", headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"}
    )

    assert response.json() == {"ip": "203.0.113.7"}
