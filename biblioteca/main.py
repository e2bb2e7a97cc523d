"""Biblioteca API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly under settings.api_prefix
    - Global error handlers map BibliotecaError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from biblioteca.api.error_handlers import register_error_handlers
from biblioteca.api.routes import authors, books, health
from biblioteca.config import Settings, get_settings
from biblioteca.infrastructure.database import close_db, init_db
from biblioteca.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    if settings.database_create_tables:
        await manager.create_all()
        logger.info("Database schema created from ORM metadata")
    logger.info("Biblioteca API started")
    yield
    await close_db()
    logger.info("Biblioteca API shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application with routes, middleware and error handlers."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Biblioteca API", version=health.SERVICE_VERSION, lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(authors.router, prefix=settings.api_prefix)
    app.include_router(books.router, prefix=settings.api_prefix)

    register_error_handlers(app)
    return app


app = create_app()
