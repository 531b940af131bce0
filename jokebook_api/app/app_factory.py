"""
Application factory for the Jokebook API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes the API router.  Importing
it has no side effects; ``main`` builds the module-level ``app`` for
uvicorn and ``run.py`` builds its own app around an already connected
document store.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import Settings, get_settings
from .core.db import DocumentStore
from .core.errors import JokebookError
from .core.logging_config import setup_logging
from .schemas.person import describe_validation_errors
from .services.joke_service import JokeService
from .services.person_service import PersonService

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Map domain and validation errors to ``{"error": ...}`` responses."""

    @app.exception_handler(JokebookError)
    async def jokebook_error_handler(request: Request, exc: JokebookError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = describe_validation_errors(exc.errors())
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Raised by the framework itself, e.g. undecodable bodies or unknown routes.
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[DocumentStore] = None,
    joke_service: Optional[JokeService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration; read from the environment when omitted.
    store : Optional[DocumentStore]
        An already connected document store.  When omitted the store
        is opened from ``settings.database_url`` on startup, and a
        ``StartupError`` aborts the boot.
    joke_service : Optional[JokeService]
        Joke proxy; built from the settings when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.joke_service = joke_service or JokeService(
        base_url=settings.joke_api_url,
        category=settings.joke_category,
        count=settings.joke_count,
        timeout=settings.joke_api_timeout,
    )
    if store is not None:
        app.state.person_service = PersonService(store)

    origins = settings.cors_origin_list
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        return "Server is Ready!"

    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        # Connect lazily only when no store was injected.
        if not hasattr(app.state, "person_service"):
            app.state.person_service = PersonService(
                DocumentStore.connect(settings.require_database_url())
            )
        logger.info("%s %s ready", settings.project_name, settings.api_version)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        person_service = getattr(app.state, "person_service", None)
        if person_service is not None:
            person_service.store.close()
        app.state.joke_service.close()

    return app

