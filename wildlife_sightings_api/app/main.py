"""
Main entrypoint for the Wildlife Sightings API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn wildlife_sightings_api.app.main:app --reload

Besides the JSON API under ``/api`` the app serves a landing page at
``/`` and static assets from ``settings.static_dir`` under ``/static``.
"""

import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException, status
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .api.router import router as api_router


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api")

    @app.get("/", include_in_schema=False)
    async def landing_page() -> FileResponse:
        index_file = Path(settings.views_dir) / "index.html"
        if not index_file.is_file():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return FileResponse(index_file, media_type="text/html")

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")
    else:
        logger.warning("Static directory %s not found; /static is disabled", static_dir)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
