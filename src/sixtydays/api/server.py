"""Starlette application factory for the cards API."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse

from sixtydays.api.routes import card_routes

if TYPE_CHECKING:
    from sixtydays.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)

__all__ = ["create_app"]


async def _http_error(request: Request, exc: Exception) -> JSONResponse:
    """Unknown routes and wrong methods, in the same body shape as service errors."""
    assert isinstance(exc, HTTPException)
    code = "NOT_FOUND" if exc.status_code == 404 else f"HTTP_{exc.status_code}"
    return JSONResponse(
        {"errors": exc.detail, "code": code, "detail": {"path": request.url.path}},
        status_code=exc.status_code,
        headers=exc.headers,
    )


async def _server_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        {"errors": "Internal server error", "code": "INTERNAL", "detail": {}},
        status_code=500,
    )


def create_app(workspace: Workspace) -> Starlette:
    """Build the ASGI app serving ``/cards`` from *workspace*'s database.

    The workspace is closed when the app shuts down.
    """

    @asynccontextmanager
    async def lifespan(_app: Starlette) -> AsyncIterator[None]:
        try:
            yield
        finally:
            workspace.close()

    app = Starlette(
        routes=card_routes(workspace),
        exception_handlers={HTTPException: _http_error, Exception: _server_error},
        lifespan=lifespan,
    )
    return app
