"""
Main FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookreviews import __version__
from bookreviews.config import Settings, get_settings
from bookreviews.database import Database
from bookreviews.exceptions import AppError
from bookreviews.services.tokens import TokenAuthority

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan handler.
    Logs startup state and drops expired sessions on shutdown.
    """
    settings: Settings = app.state.settings
    db: Database = app.state.db
    logger.info("Starting %s v%s", settings.app_name, __version__)
    logger.info("Catalog: %d books", len(db.catalog) if db.catalog is not None else 0)
    logger.info("Debug: %s", settings.debug)

    yield

    removed = db.sessions.cleanup_expired()
    logger.info("%s shutdown complete (%d expired sessions dropped)", settings.app_name, removed)


def create_app(
    settings: Optional[Settings] = None,
    db: Optional[Database] = None,
    tokens: Optional[TokenAuthority] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Every app owns its own data container, so tests can build isolated
    instances with explicit settings, stores or a token clock.
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description="Book catalog with per-user reviews",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
    )

    app.state.settings = settings
    app.state.db = db or Database.create()
    app.state.tokens = tokens or TokenAuthority.from_settings(settings)

    # Include routers
    from bookreviews.routers import auth, general, health, reviews

    app.include_router(health.router, tags=["Health"])
    app.include_router(auth.router, tags=["Auth"])
    app.include_router(reviews.router, tags=["Reviews"])
    app.include_router(general.router, tags=["Books"])

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """Render application errors as {"message": ...}."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Malformed request bodies are reported as 400 like missing fields."""
        logger.debug("Request validation failed on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid request body"},
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error"},
        )

    return app


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "bookreviews.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
    )
