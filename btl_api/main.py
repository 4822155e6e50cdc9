"""FastAPI application factory.

Startup: load settings, configure JSON logging, mount the health, root and
catch-all routers, register error handlers and middleware. There is no
shutdown work; the Lambda runtime freezes or terminates the process.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from btl_api.config.settings import ApiSettings
from btl_api.logging_config import configure_logging
from btl_api.middleware.cors import CorsHeadersMiddleware
from btl_api.middleware.error_handler import register_error_handlers
from btl_api.middleware.request_log import RequestLogMiddleware
from btl_api.routers.health import create_health_router
from btl_api.routers.not_found import create_not_found_router
from btl_api.routers.root import create_root_router

logger = logging.getLogger(__name__)


def create_app(settings: ApiSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    ``settings`` defaults to ``ApiSettings()`` read from the environment.
    """
    settings = settings or ApiSettings()

    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.service_name,
        version=settings.version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    register_error_handlers(app)

    # Mount routers (catch-all last)
    app.include_router(create_health_router(settings=settings))
    app.include_router(create_root_router(settings=settings))
    app.include_router(create_not_found_router())

    # Middleware (order: request_log → cors → routes)
    # Note: Starlette middleware is applied in reverse order of add_middleware calls
    app.add_middleware(CorsHeadersMiddleware)
    app.add_middleware(RequestLogMiddleware)

    logger.info("Starting %s v%s", settings.service_name, settings.version)

    return app
