"""
Main entrypoint for the Mailing Lists API.

This module assembles the FastAPI application, sets up logging and
includes the versioned router.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``, e.g.::

    uvicorn mailing_lists_api.app.main:app --port 3000

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .core.config import get_data_path, settings
from .core.errors import StorageError
from .core.logging_config import log_requests, setup_logging
from .core.storage import JsonFileStore, init_storage
from .api.v1.router import router as v1_router


def create_app(data_file: Optional[str] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    data_file : Optional[str]
        Data file served by this application and created on startup
        if missing.  Defaults to the configured ``DATA_FILE``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that startup can log.
    setup_logging(settings.log_level, settings.log_file)
    logger = logging.getLogger(__name__)

    data_path = get_data_path(data_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    # One store per application so all requests share its lock.
    app.state.store = JsonFileStore(data_path, indent=settings.json_indent)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> PlainTextResponse:
        # A broken data file fails the request, not the process.
        logger.exception("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
        return PlainTextResponse(
            f"Storage error: {exc}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    # Version 1 is served from the root; the paths predate the versioned layout.
    app.include_router(v1_router)

    @app.on_event("startup")
    async def startup_event() -> None:
        init_storage(data_path)
        logger.info("Serving mailing lists from %s", data_path)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
