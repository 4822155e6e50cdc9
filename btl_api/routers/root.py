"""API root endpoints describing the service (GET / and GET /api)."""

from __future__ import annotations

from fastapi import APIRouter

from btl_api.config.settings import ApiSettings
from btl_api.models.responses import ApiResponse
from btl_api.models.schemas import RootInfo
from btl_api.routers.health import HEALTH_PATHS


def create_root_router(*, settings: ApiSettings) -> APIRouter:
    """Factory that creates the root router with injected settings."""

    root_router = APIRouter(tags=["root"])

    async def root() -> dict:
        info = RootInfo(
            name=settings.service_name,
            version=settings.version,
            endpoints=list(HEALTH_PATHS),
        )
        return ApiResponse[RootInfo].ok(info).model_dump()

    for path in ("/", "/api"):
        root_router.add_api_route(path, root, methods=["GET"])

    return root_router
