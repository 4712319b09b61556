"""Entry point for the Social Blog API.

Serves the FastAPI app with uvicorn.  Host, port, log level and the
database location come from environment variables (see
``social_blog_api/app/core/config.py``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from social_blog_api.app.core.config import settings
from social_blog_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn on ``HOST``:``PORT``."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        # Keep the handlers installed by setup_logging.
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Shutting down")
