"""Exception handlers mapping SwiftMT799 errors to JSON responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from swiftmt799.core.exceptions import SwiftMT799Error

logger = logging.getLogger(__name__)


async def swiftmt799_exception_handler(request: Request, exc: SwiftMT799Error) -> JSONResponse:
    """Render a SwiftMT799Error as ``{"detail": ...}`` with its status code."""
    logger.warning(
        "%s on %s %s: %s", type(exc).__name__, request.method, request.url.path, exc,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SwiftMT799Error, swiftmt799_exception_handler)
