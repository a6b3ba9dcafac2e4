"""
Error taxonomy and the HTTP error mapping.

The data loader raises one of the ``SightingsDataError`` subclasses
below.  Routes let them propagate; ``register_exception_handlers``
installs the single place where they are converted to the uniform
JSON error payload::

    {"error": "<message>", "route": "/api/sightings", "timestamp": "..."}

Every kind of loader failure maps to HTTP 500.  Unmatched routes get a
404 payload listing the available routes, and anything else escaping a
route becomes a generic 500 ``Internal Server Error`` payload.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from wildlife_sightings_api.app.core.config import settings


logger = logging.getLogger(__name__)


AVAILABLE_ROUTES: List[str] = [
    "GET /",
    "GET /api/sightings",
    "GET /api/sightings/verified",
    "GET /api/sightings/species-list",
    "GET /api/sightings/habitat/forest",
    "GET /api/sightings/search/eagle",
    "GET /api/sightings/find-index/moose",
    "GET /api/sightings/recent",
]


class SightingsDataError(Exception):
    """Base class for failures while loading the sightings file."""

    kind = "Unknown"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class SightingsNotFoundError(SightingsDataError):
    """The data file does not exist."""

    kind = "NotFound"


class MalformedSightingsError(SightingsDataError):
    """The data file is not valid JSON."""

    kind = "MalformedData"


class InvalidSightingsSchemaError(SightingsDataError):
    """The JSON does not hold a valid ``sightings`` array."""

    kind = "InvalidSchema"


class SightingsLoadError(SightingsDataError):
    """Any other failure while reading the data file."""

    kind = "Unknown"


def utc_timestamp() -> str:
    """Return the current UTC time as ISO‑8601 with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _route_name(request: Request) -> str:
    # Every data route is a literal path, so the request path names it.
    return request.url.path


def error_payload(message: str, route: str) -> Dict[str, Any]:
    return {"error": message, "route": route, "timestamp": utc_timestamp()}


async def sightings_error_handler(request: Request, exc: SightingsDataError) -> JSONResponse:
    """Convert a loader failure into the uniform 500 payload."""
    route = _route_name(request)
    logger.error("Error in %s: [%s] %s", route, exc.kind, exc.message)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_payload(exc.message or "Internal server error", route),
    )


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Answer unmatched routes with the list of routes that do exist.

    Only GET routes are served, so a method mismatch (405) is reported
    the same way as an unknown path.  Other HTTP errors keep FastAPI's
    default rendering.
    """
    if exc.status_code not in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return await http_exception_handler(request, exc)
    url = request.url.path
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "Route not found",
            "message": f"The route {url} does not exist on this server",
            "availableRoutes": AVAILABLE_ROUTES,
        },
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s", request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "message": str(exc) if settings.debug else "Something went wrong!",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers above to ``app``."""
    app.add_exception_handler(SightingsDataError, sightings_error_handler)
    app.add_exception_handler(StarletteHTTPException, not_found_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
