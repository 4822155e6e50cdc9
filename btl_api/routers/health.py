"""Health check endpoints.

- GET /health
- GET /api/health

Both answer with the running build's version and never fail.
"""

from __future__ import annotations

from fastapi import APIRouter

from btl_api.config.settings import ApiSettings
from btl_api.models.responses import ApiResponse
from btl_api.models.schemas import HealthInfo

HEALTH_PATHS: list[str] = ["/health", "/api/health"]


def create_health_router(*, settings: ApiSettings) -> APIRouter:
    """Factory that creates the health router with injected settings."""

    health_router = APIRouter(tags=["health"])

    async def health() -> dict:
        """Service health check."""
        info = HealthInfo(version=settings.version)
        return ApiResponse[HealthInfo].ok(info).model_dump()

    for path in HEALTH_PATHS:
        health_router.add_api_route(path, health, methods=["GET"])

    return health_router
