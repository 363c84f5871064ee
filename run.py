"""Entry point for the Phonebook API.

Starts the FastAPI application with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``3001``); see ``phonebook_api/app/core/config.py`` for the other
settings.  Uvicorn handles SIGINT/SIGTERM and shuts the server down
gracefully.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from phonebook_api.app.core.config import settings
from phonebook_api.app.main import app


async def main() -> None:
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
