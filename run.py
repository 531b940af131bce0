"""Entry point for the Jokebook API service.

This script connects to the document store and then serves the FastAPI
application with Uvicorn.  It is intended to be executed from the
project root, for example under Docker, where you only specify a
single Python file to run.

Configuration is read from environment variables (see
``jokebook_api/app/core/config.py``).  ``DATABASE_URL`` is required;
if it is missing or the store cannot be opened the process exits with
status 1.

Usage:
    DATABASE_URL=./INDEX.db PORT=3000 python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from jokebook_api.app.core.config import get_settings
from jokebook_api.app.core.db import DocumentStore
from jokebook_api.app.core.errors import StartupError
from jokebook_api.app.core.logging_config import setup_logging
from jokebook_api.app.app_factory import create_app

logger = logging.getLogger("jokebook")


def main() -> None:
    """Connect to storage, then serve the API until interrupted."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)
    try:
        store = DocumentStore.connect(settings.require_database_url())
    except StartupError as exc:
        logger.error("Startup failed: %s", exc.message)
        sys.exit(1)

    app = create_app(settings=settings, store=store)
    logger.info("Server running at http://localhost:%d", settings.port)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    asyncio.run(server.serve())


if __name__ == "__main__":
    main()
