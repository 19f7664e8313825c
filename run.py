"""Entry point for the Contact Manager API.

Serves the FastAPI application with Uvicorn.  Host, port and the
database location are read from environment variables (``HOST``,
``PORT``, ``DATABASE_URL``); see ``contact_manager_api/app/core/config.py``
for the full list.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from contact_manager_api.app.core.config import settings
from contact_manager_api.app.main import app


async def main() -> None:
    """Start the API server."""
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
