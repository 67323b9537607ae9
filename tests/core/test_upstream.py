"""Tests for the upstream client."""

import httpx
import pytest

from ponhub.config import Settings
from ponhub.core.errors import UpstreamError, handle_gateway_error
from ponhub.core.upstream import UpstreamClient, create_upstream_client
from ponhub.reactions.service import ReactionValidationError


def client_for(handler) -> UpstreamClient:
    return UpstreamClient(
        httpx.AsyncClient(
            base_url="http://upstream.test", transport=httpx.MockTransport(handler)
        )
    )


class TestUpstreamClient:
    @pytest.mark.asyncio
    async def test_get_json(self):
        client = client_for(lambda request: httpx.Response(200, json=[1, 2]))

        assert await client.get_json("/comments") == [1, 2]

    @pytest.mark.asyncio
    async def test_post_json_sends_body(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json={"ok": True})

        result = await client_for(handler).post_json("/comments", {"name": "🔥"})

        assert result == {"ok": True}
        assert seen[0].headers["content-type"] == "application/json"
        assert seen[0].url == "http://upstream.test/comments"

    @pytest.mark.asyncio
    async def test_post_without_body(self):
        client = client_for(lambda request: httpx.Response(204))

        assert await client.post_json("/reactions", {}, expect_body=False) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status_code", [400, 404, 500, 503])
    async def test_non_success_status(self, status_code: int):
        client = client_for(lambda request: httpx.Response(status_code))

        with pytest.raises(UpstreamError) as exc_info:
            await client.get_json("/comments")

        assert str(status_code) in exc_info.value.message

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            msg = "refused"
            raise httpx.ConnectError(msg, request=request)

        with pytest.raises(UpstreamError):
            await client_for(handler).get_json("/comments")

    @pytest.mark.asyncio
    async def test_ping(self):
        assert await client_for(lambda request: httpx.Response(200)).ping() is True
        assert await client_for(lambda request: httpx.Response(500)).ping() is False


@pytest.mark.asyncio
async def test_aclose_closes_http_client():
    client = client_for(lambda request: httpx.Response(200))

    await client.aclose()

    assert client.http.is_closed


def test_create_from_settings():
    settings = Settings(
        upstream_base_url="http://comments.internal:9000",
        upstream_timeout_seconds=2.5,
    )

    client = create_upstream_client(settings)

    assert client.base_url.rstrip("/") == "http://comments.internal:9000"
    assert client.http.timeout.read == 2.5


def test_legacy_base_url_variable(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("UPSTREAM_BASE_URL", raising=False)
    monkeypatch.setenv("NEXT_PUBLIC_BASE_URL", "http://legacy:8080")

    assert Settings().upstream_base_url == "http://legacy:8080"


class TestHandleGatewayError:
    def test_validation_keeps_message(self):
        exc = handle_gateway_error(ReactionValidationError(), "Failed")

        assert exc.status_code == 400
        assert exc.detail == "commentId and emoji are required"

    def test_upstream_uses_failure_message(self):
        error = UpstreamError("GET /comments returned 502")

        exc = handle_gateway_error(error, "Failed")

        assert exc.status_code == 500
        assert exc.detail == "Failed"
