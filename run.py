"""Entry point for the Mailing Lists API.

This script serves the FastAPI application with Uvicorn.  It is meant
to be executed from the project root, for example under Docker, where
you only specify a single Python file to run.

Configuration such as PORT, DATA_FILE and LOG_LEVEL may be placed in a
`.env` file in the same directory; see ``mailing_lists_api/app/core/config.py``
for the supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from mailing_lists_api.app.core.config import settings
from mailing_lists_api.app.main import app


async def main() -> None:
    """Serve the API on ``settings.host`` and ``settings.port``.

    The port is read from the ``PORT`` environment variable and
    defaults to ``3000``.
    """
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server listening on Port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
