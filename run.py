"""Entry point for the Product Store API.

Starts the FastAPI application under Uvicorn.  Host, port and the
database file come from ``Settings``; defaults bind to
``127.0.0.1:3030`` and store data in ``products.db`` in the current
working directory.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from product_store_api.app.core.config import settings
from product_store_api.app.main import app


logger = logging.getLogger(__name__)


async def run_api() -> None:
    """Serve the API until the process is terminated."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    logger.info("Listening on http://%s:%s", settings.host, settings.port)
    await server.serve()


def main() -> None:
    asyncio.run(run_api())


if __name__ == "__main__":
    main()
