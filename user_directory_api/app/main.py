"""
Main entrypoint for the User Directory API.

This module assembles the FastAPI application: it sets up logging,
creates the in-memory ``UserService``, installs the JSON error
handlers and includes the API router under ``/api``.  The module-level
``app`` can be served directly::

    uvicorn user_directory_api.app.main:app --port 5000
"""

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import settings
from .core.exceptions import register_exception_handlers
from .core.logging_config import setup_logging
from .services.user_service import UserService


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Each call builds an independent application with its own empty
    user store.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.user_service = UserService()

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api")

    return app


# Created at import time so that uvicorn can discover it.
app = create_app()
