"""Entry point for the post feed service.

Builds the FastAPI application and serves it with Uvicorn on the host
and port from the settings (``HOST`` / ``PORT`` environment variables,
``localhost:3000`` by default).  Uvicorn's own access log is disabled;
requests are logged by the application's access log middleware.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from post_feed_api.app.core.config import settings
from post_feed_api.app.main import app


def build_config() -> Config:
    """Return the Uvicorn configuration used to serve the application."""
    return Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        access_log=False,
        log_level=settings.log_level.lower(),
    )


async def main() -> None:
    """Serve the application until interrupted."""
    server = Server(build_config())
    logging.getLogger(__name__).info("Serving %s on %s:%s", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
