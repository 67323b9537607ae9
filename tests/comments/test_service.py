"""Tests for CommentGateway."""

import httpx
import pytest

from ponhub.comments.models import Comment, Reply
from ponhub.comments.service import CommentGateway, CommentValidationError, clean_text
from ponhub.core.errors import UpstreamError
from ponhub.core.upstream import UpstreamClient
from tests.fakes import FakeUpstream


def gateway_for(handler) -> CommentGateway:
    http = httpx.AsyncClient(
        base_url="http://upstream.test", transport=httpx.MockTransport(handler)
    )
    return CommentGateway(UpstreamClient(http))


@pytest.fixture
def gateway(upstream_client: UpstreamClient) -> CommentGateway:
    return CommentGateway(upstream_client)


class TestCleanText:
    def test_strips(self):
        assert clean_text("  hi  ") == "hi"

    def test_missing(self):
        assert clean_text(None) == ""


class TestCreateComment:
    @pytest.mark.asyncio
    async def test_top_level(self, gateway: CommentGateway):
        created = await gateway.create_comment(name=" A ", message=" B ")

        assert isinstance(created, Comment)
        assert (created.name, created.message) == ("A", "B")
        assert created.reactions == {}
        assert created.replies == []

    @pytest.mark.asyncio
    async def test_reply(self, gateway: CommentGateway, upstream: FakeUpstream):
        parent = upstream.seed("A", "B")

        created = await gateway.create_comment(
            name="C", message="D", parent_id=parent["id"]
        )

        assert isinstance(created, Reply)
        assert created.parent_comment_id == parent["id"]

    @pytest.mark.asyncio
    async def test_validation_error(
        self, gateway: CommentGateway, upstream: FakeUpstream
    ):
        with pytest.raises(CommentValidationError) as exc_info:
            await gateway.create_comment(name=" ", message="B")

        assert exc_info.value.code == "validation_error"
        assert exc_info.value.message == "Name and message are required"
        assert upstream.call_count == 0

    @pytest.mark.asyncio
    async def test_malformed_entity_is_upstream_error(self):
        gateway = gateway_for(lambda request: httpx.Response(201, json={"id": "1"}))

        with pytest.raises(UpstreamError):
            await gateway.create_comment(name="A", message="B")

    @pytest.mark.asyncio
    async def test_numeric_ids_become_strings(self):
        gateway = gateway_for(
            lambda request: httpx.Response(
                201, json={"id": 7, "name": "A", "message": "B", "timestamp": 1}
            )
        )

        created = await gateway.create_comment(name="A", message="B")

        assert created.id == "7"


class TestListComments:
    @pytest.mark.asyncio
    async def test_null_payload_is_empty_board(self):
        gateway = gateway_for(lambda request: httpx.Response(200, content=b"null"))

        assert await gateway.list_comments() == []

    @pytest.mark.asyncio
    async def test_non_list_payload(self):
        gateway = gateway_for(lambda request: httpx.Response(200, json={"items": []}))

        with pytest.raises(UpstreamError):
            await gateway.list_comments()

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        gateway = gateway_for(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(UpstreamError):
            await gateway.list_comments()

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            msg = "too slow"
            raise httpx.ReadTimeout(msg, request=request)

        with pytest.raises(UpstreamError) as exc_info:
            await gateway_for(handler).list_comments()

        assert "timed out" in exc_info.value.message
