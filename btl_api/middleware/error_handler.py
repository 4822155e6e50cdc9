"""Error taxonomy and FastAPI exception handlers.

Every application error is one of the closed ``ErrorKind`` union below.
``status_code_for`` is the single place an HTTP status is derived from an
error; the exception handlers use it and render the error's display text in
the JSON envelope: { success: false, error }.
"""

from __future__ import annotations

import logging
import traceback
from typing import assert_never, get_args

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from btl_api.middleware.cors import CORS_HEADERS
from btl_api.middleware.request_log import requested_path
from btl_api.models.responses import ApiResponse

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class ApiError(Exception):
    """Base error for all application errors.

    Not raised directly: only the concrete kinds in ``ErrorKind`` have a
    status code and a registered handler.
    """

    prefix: str = ""
    message: str | None = None

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"{self.prefix}{message}")


class NotFoundError(ApiError):
    """No handler for the requested method and path."""

    prefix = "Not found: "


class BadRequestError(ApiError):
    """Malformed or unacceptable request."""

    prefix = "Bad request: "


class InternalError(ApiError):
    """Unexpected failure while producing a response."""

    prefix = "Internal error: "


class UnauthorizedError(ApiError):
    """Missing or invalid credentials. Carries no message."""

    def __init__(self) -> None:
        Exception.__init__(self, "Unauthorized")


ErrorKind = NotFoundError | BadRequestError | InternalError | UnauthorizedError


def status_code_for(error: ErrorKind) -> int:
    """Map an error kind to its fixed HTTP status code."""
    match error:
        case NotFoundError():
            return 404
        case BadRequestError():
            return 400
        case InternalError():
            return 500
        case UnauthorizedError():
            return 401
        case _:
            assert_never(error)


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------


def _envelope(status_code: int, error: str) -> JSONResponse:
    """Build a JSON envelope error response."""
    return JSONResponse(
        status_code=status_code,
        content=ApiResponse.fail(error).model_dump(),
        headers=CORS_HEADERS,
    )


async def _api_error_handler(_request: Request, exc: ErrorKind) -> JSONResponse:
    """Handle every concrete error kind."""
    return _envelope(status_code_for(exc), str(exc))


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render routing failures as not-found envelopes.

    Starlette raises 404 when no route matches and 405 when only a partial
    (path but not method) match exists; both mean no handler for the request.
    """
    if exc.status_code in (404, 405):
        return await _api_error_handler(request, NotFoundError(requested_path(request)))
    return _envelope(exc.status_code, str(exc.detail))


async def _unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions — log traceback, return generic 500."""
    logger.error(
        "Unhandled exception: %s\n%s",
        exc,
        traceback.format_exc(),
    )
    error = InternalError("Internal server error")
    return _envelope(status_code_for(error), str(error))


# ---------------------------------------------------------------------------
# Registration helper
# ---------------------------------------------------------------------------


def register_error_handlers(app: FastAPI) -> None:
    """Wire up all exception handlers on the FastAPI application."""
    for kind in get_args(ErrorKind):
        app.add_exception_handler(kind, _api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error_handler)  # type: ignore[arg-type]
