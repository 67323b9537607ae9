# ruff: noqa: PLW0603
"""Upstream comment service client.

Provides the shared async HTTP client used by the comment and reaction
gateways. The client is created once in the application lifespan and closed
on shutdown.
"""

from typing import Any

import httpx
from fastapi import HTTPException, status

from ponhub.config import Settings, get_settings
from ponhub.core.errors import UpstreamError
from ponhub.core.logging import get_logger


logger = get_logger(__name__)

# Longest slice of an upstream error body kept in the logs
_MAX_LOGGED_BODY = 500


class UpstreamClient:
    """Thin JSON wrapper around ``httpx.AsyncClient``.

    Every failure mode (transport error, timeout, non-2xx status, body that
    is not JSON) is logged here with full detail and raised as
    ``UpstreamError``.
    """

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    @property
    def base_url(self) -> str:
        return str(self.http.base_url)

    async def get_json(self, path: str) -> Any:
        """GET ``path`` and return the decoded JSON body."""
        response = await self._request("GET", path)
        return self._decode(response)

    async def post_json(
        self, path: str, payload: dict[str, Any], expect_body: bool = True
    ) -> Any:
        """POST ``payload`` as JSON to ``path``.

        Returns the decoded JSON body, or None when ``expect_body`` is False.
        """
        response = await self._request("POST", path, payload)
        if not expect_body:
            return None
        return self._decode(response)

    async def ping(self) -> bool:
        """Check whether the upstream answers its health endpoint."""
        try:
            await self._request("GET", "/healthz")
        except UpstreamError:
            return False
        return True

    async def aclose(self) -> None:
        await self.http.aclose()

    async def _request(
        self, method: str, path: str, payload: dict[str, Any] | None = None
    ) -> httpx.Response:
        try:
            response = await self.http.request(method, path, json=payload)
        except httpx.TimeoutException as e:
            logger.error(
                "upstream_request_timeout", method=method, path=path, error=str(e)
            )
            msg = f"{method} {path} timed out"
            raise UpstreamError(msg) from e
        except httpx.RequestError as e:
            logger.error(
                "upstream_request_failed",
                method=method,
                path=path,
                error=str(e),
                error_type=type(e).__name__,
            )
            msg = f"{method} {path} failed: {e}"
            raise UpstreamError(msg) from e

        if not response.is_success:
            logger.error(
                "upstream_bad_status",
                method=method,
                path=path,
                status_code=response.status_code,
                response_text=response.text[:_MAX_LOGGED_BODY],
            )
            msg = f"{method} {path} returned {response.status_code}"
            raise UpstreamError(msg)

        logger.debug(
            "upstream_request_completed",
            method=method,
            path=path,
            status_code=response.status_code,
        )
        return response

    def _decode(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error(
                "upstream_invalid_json",
                path=response.request.url.path,
                response_text=response.text[:_MAX_LOGGED_BODY],
            )
            msg = f"{response.request.url.path} returned invalid JSON"
            raise UpstreamError(msg) from e


# Global upstream client
_upstream_client: UpstreamClient | None = None


def create_upstream_client(
    settings: Settings, transport: httpx.AsyncBaseTransport | None = None
) -> UpstreamClient:
    """Build an upstream client from settings."""
    http = httpx.AsyncClient(
        base_url=settings.upstream_base_url,
        timeout=settings.upstream_timeout_seconds,
        headers={"Accept": "application/json"},
        transport=transport,
    )
    return UpstreamClient(http)


async def init_upstream() -> UpstreamClient:
    """Create the shared upstream client."""
    global _upstream_client

    settings = get_settings()
    _upstream_client = create_upstream_client(settings)
    logger.info("upstream_client_initialized", base_url=settings.upstream_base_url)
    return _upstream_client


async def shutdown_upstream() -> None:
    """Close the shared upstream client."""
    global _upstream_client

    if _upstream_client:
        await _upstream_client.aclose()
        logger.info("upstream_client_closed")
        _upstream_client = None


def get_upstream() -> UpstreamClient | None:
    """Get the shared upstream client instance."""
    return _upstream_client


async def get_upstream_client() -> UpstreamClient:
    """FastAPI dependency for the upstream client."""
    if _upstream_client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Comment service unavailable",
        )
    return _upstream_client
