"""Entry point that serves the Finance API with uvicorn.

Host and port come from ``Settings`` (``HOST`` and ``PORT`` environment
variables, defaulting to ``0.0.0.0`` and ``8080``).  Once the server is
up the base URL and the documentation URL are written to the log.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from finance_api.app.core.config import settings
from finance_api.app.main import app

logger = logging.getLogger("finance_api.run")


async def run_api() -> None:
    """Start the API using Uvicorn and announce where it is reachable."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    serve_task = asyncio.create_task(server.serve())
    while not server.started and not serve_task.done():
        await asyncio.sleep(0.05)
    if server.started:
        base_url = settings.public_url.rstrip("/")
        logger.info("Server berjalan di %s", base_url)
        logger.info("Swagger docs tersedia di %s%s", base_url, settings.docs_url)
    await serve_task


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
