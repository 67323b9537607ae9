"""Shared fixtures."""

import os
from collections.abc import AsyncIterator


os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_FILE_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from ponhub.core.upstream import UpstreamClient, get_upstream_client  # noqa: E402
from ponhub.main import create_app  # noqa: E402
from tests.fakes import FakeUpstream  # noqa: E402


UPSTREAM_URL = "http://upstream.test"


@pytest.fixture
def upstream() -> FakeUpstream:
    """Fresh in-memory upstream comment service."""
    return FakeUpstream()


@pytest_asyncio.fixture
async def upstream_client(upstream: FakeUpstream) -> AsyncIterator[UpstreamClient]:
    """Upstream client wired to the fake service, closed after the test."""
    http = httpx.AsyncClient(
        base_url=UPSTREAM_URL, transport=httpx.MockTransport(upstream.handler)
    )
    client = UpstreamClient(http)
    yield client
    await client.aclose()


@pytest.fixture
def app(upstream_client: UpstreamClient) -> FastAPI:
    """Application using the fake upstream."""
    application = create_app()
    application.dependency_overrides[get_upstream_client] = lambda: upstream_client
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client for the application."""
    return TestClient(app)
