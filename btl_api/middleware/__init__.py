"""Middleware package — error taxonomy, CORS headers, and request logging."""

from btl_api.middleware.cors import CORS_HEADERS, CorsHeadersMiddleware
from btl_api.middleware.error_handler import (
    ApiError,
    BadRequestError,
    ErrorKind,
    InternalError,
    NotFoundError,
    UnauthorizedError,
    register_error_handlers,
    status_code_for,
)
from btl_api.middleware.request_log import RequestLogMiddleware

__all__ = [
    "CORS_HEADERS",
    "ApiError",
    "BadRequestError",
    "CorsHeadersMiddleware",
    "ErrorKind",
    "InternalError",
    "NotFoundError",
    "RequestLogMiddleware",
    "UnauthorizedError",
    "register_error_handlers",
    "status_code_for",
]
