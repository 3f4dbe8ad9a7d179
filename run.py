"""Entry point for the User Directory API.

Serves the FastAPI application with uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``5000``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from user_directory_api.app.core.config import settings
from user_directory_api.app.core.logging_config import SERVICE_LOGGER
from user_directory_api.app.main import app

logger = logging.getLogger(SERVICE_LOGGER)


async def main() -> None:
    """Start the API server and block until it stops."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    display_host = "localhost" if settings.host in {"0.0.0.0", "127.0.0.1"} else settings.host
    logger.info("Server running on http://%s:%s", display_host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
