"""Health check endpoints."""

from ponhub.health.router import router


__all__ = ["router"]
