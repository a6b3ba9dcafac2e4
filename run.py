"""Entry point for the Wildlife Sightings API.

Launches the FastAPI application with Uvicorn.  Host and port come
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3000``); see ``wildlife_sightings_api.app.core.config``
for the remaining settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from wildlife_sightings_api.app.core.config import settings
from wildlife_sightings_api.app.main import app


logger = logging.getLogger(__name__)


async def main() -> None:
    """Serve the API until interrupted."""
    # log_config=None keeps the handlers installed by setup_logging.
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    display_host = "localhost" if settings.host in ("0.0.0.0", "::") else settings.host
    base_url = f"http://{display_host}:{settings.port}"
    logger.info("Server running on %s", base_url)
    logger.info("About page: %s/", base_url)
    logger.info("API base: %s/api/sightings", base_url)
    logger.info("Press Ctrl+C to stop the server")
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
