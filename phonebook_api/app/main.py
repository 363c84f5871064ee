"""
Main entrypoint for the Phonebook API.

This module assembles the FastAPI application: it sets up logging,
creates the in‑memory directory, registers error handlers and the
access log middleware and includes the routers.  ``create_app`` builds
a fresh application (and a fresh directory) on each call; the module
level ``app`` is what ASGI servers load, e.g.::

    uvicorn phonebook_api.app.main:app --port 3001
"""

import logging
import random
from typing import Optional

from fastapi import FastAPI

from .api.router import router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import log_requests, setup_logging
from .core.store import Directory


def create_app(
    directory: Optional[Directory] = None,
    id_rng: Optional[random.Random] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    directory : Optional[Directory]
        Storage to serve.  By default a new directory is created,
        holding the demo entries unless ``settings.seed_directory`` is
        off.
    id_rng : Optional[random.Random]
        Random source used to draw ids for new entries.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    docs = settings.enable_docs
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        docs_url="/docs" if docs else None,
        redoc_url="/redoc" if docs else None,
        openapi_url="/openapi.json" if docs else None,
    )

    if directory is None:
        directory = Directory.seeded() if settings.seed_directory else Directory()
    app.state.directory = directory
    app.state.id_rng = id_rng or random.Random()

    register_exception_handlers(app)
    app.middleware("http")(log_requests)
    app.include_router(router)

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info(
            "Server running on port %s with %s entries", settings.port, len(app.state.directory)
        )

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        logger.info("Server closed")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
