"""Fallback route for every method and path no other router claims.

Must be mounted last: Starlette picks the first full match, and a GET-only
route hit with another method is only a partial match, so ``POST /health``
lands here too. Methods outside ``_ALL_METHODS`` only partially match and
are turned into the same not-found error by the 405 exception handler.
"""

from __future__ import annotations

from fastapi import APIRouter, Request

from btl_api.middleware.error_handler import NotFoundError
from btl_api.middleware.request_log import requested_path

_ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_not_found_router() -> APIRouter:
    """Factory that creates the catch-all not-found router."""

    not_found_router = APIRouter(tags=["fallback"], include_in_schema=False)

    @not_found_router.api_route("/{_path:path}", methods=_ALL_METHODS)
    async def not_found(request: Request) -> None:
        raise NotFoundError(requested_path(request))

    return not_found_router
