"""Health check endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from ponhub.config import get_settings
from ponhub.core.upstream import UpstreamClient, get_upstream_client


router = APIRouter(prefix="/health", tags=["health"])


@router.get("/live")
async def liveness() -> dict[str, str]:
    """Liveness probe - checks if the application is running."""
    return {"status": "alive"}


@router.get("/ready")
async def readiness(
    upstream: Annotated[UpstreamClient, Depends(get_upstream_client)],
) -> dict[str, str | bool]:
    """Readiness probe - reports whether the comment service answers."""
    settings = get_settings()
    upstream_ok = await upstream.ping()
    return {
        "status": "ready" if upstream_ok else "degraded",
        "upstream": "ok" if upstream_ok else "unreachable",
        "environment": settings.environment,
        "debug": settings.debug,
    }


@router.get("")
async def health() -> dict[str, str]:
    """General health check endpoint."""
    settings = get_settings()
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
    }
