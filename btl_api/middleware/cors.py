"""Fixed CORS headers middleware.

Every response, whatever its status or origin, carries the same permissive
CORS headers. The API is public and unauthenticated, so there is no origin
allow-list to consult.
"""

from __future__ import annotations

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

CORS_HEADERS: dict[str, str] = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET, POST, PUT, DELETE, OPTIONS",
    "access-control-allow-headers": "Content-Type, Authorization",
}


class CorsHeadersMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that stamps ``CORS_HEADERS`` on every response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response: Response = await call_next(request)
        for name, value in CORS_HEADERS.items():
            response.headers[name] = value
        return response
