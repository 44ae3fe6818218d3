"""Entry point for the Contact List API.

Serves the application built at import time by
``contact_list_api.app.main`` with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3000``); see ``contact_list_api.app.core.config`` for
the remaining settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from contact_list_api.app.core.config import settings
from contact_list_api.app.main import app


logger = logging.getLogger(__name__)


async def serve(server: Server, port: int, poll_interval: float = 0.05) -> None:
    """Run ``server`` and announce it once the socket is listening."""
    task = asyncio.create_task(server.serve())
    while not server.started and not task.done():
        await asyncio.sleep(poll_interval)
    if server.started:
        logger.info("Server is running on http://localhost:%s", port)
    await task


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    await serve(Server(config), settings.port)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
