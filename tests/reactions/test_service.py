"""Tests for ReactionGateway."""

import pytest

from ponhub.core.errors import UpstreamError
from ponhub.core.upstream import UpstreamClient
from ponhub.reactions.service import ReactionGateway, ReactionValidationError
from tests.fakes import FakeUpstream


@pytest.mark.asyncio
async def test_increments_upstream_tally(
    upstream_client: UpstreamClient, upstream: FakeUpstream
):
    gateway = ReactionGateway(upstream_client)

    await gateway.record_reaction("c1", "🤬")
    await gateway.record_reaction("c1", "🤬")
    await gateway.record_reaction("c2", "🤬")

    assert upstream.tally("c1", "🤬") == 2
    assert upstream.tally("c2", "🤬") == 1


@pytest.mark.asyncio
async def test_validation(upstream_client: UpstreamClient, upstream: FakeUpstream):
    gateway = ReactionGateway(upstream_client)

    with pytest.raises(ReactionValidationError):
        await gateway.record_reaction(None, "🔥")

    assert upstream.call_count == 0


@pytest.mark.asyncio
async def test_upstream_error_raised_by_default(
    upstream_client: UpstreamClient, upstream: FakeUpstream
):
    upstream.fail_status = 503
    gateway = ReactionGateway(upstream_client)

    with pytest.raises(UpstreamError):
        await gateway.record_reaction("c1", "🔥")


@pytest.mark.asyncio
async def test_upstream_error_swallowed_when_disabled(
    upstream_client: UpstreamClient, upstream: FakeUpstream
):
    upstream.fail_status = 503
    gateway = ReactionGateway(upstream_client, propagate_upstream_errors=False)

    await gateway.record_reaction("c1", "🔥")

    assert upstream.call_count == 1
