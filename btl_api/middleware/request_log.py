"""Request logging middleware.

Generates (or propagates) a UUID request ID for every incoming request,
stores it in ``request.state.request_id``, logs the method and path before
the request is dispatched, and adds an ``X-Request-ID`` response header.
"""

from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger(__name__)


def requested_path(request: Request) -> str:
    """Return the path exactly as the client sent it, still percent-encoded.

    Prefers the ASGI ``raw_path``; under Mangum, which leaves it unset, the
    API Gateway event's ``rawPath`` (HTTP API) or ``path`` (REST API). Falls
    back to the decoded path when none is available.
    """
    raw_path = request.scope.get("raw_path")
    if raw_path:
        return raw_path.split(b"?", 1)[0].decode("latin-1")
    event = request.scope.get("aws.event") or {}
    return event.get("rawPath") or event.get("path") or request.url.path


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that emits one structured entry per request.

    If the incoming request already carries an ``X-Request-ID`` header the
    provided value is reused; otherwise a new UUID4 is generated.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # Reuse caller-provided ID or generate a fresh one.
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id
        path = requested_path(request)

        logger.info(
            "Handling request",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": path,
            },
        )

        started = time.perf_counter()
        response: Response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        logger.debug(
            "Request completed",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return response
