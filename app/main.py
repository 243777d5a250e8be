"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error translation (centralized exception-to-envelope mapping)
- Logging configuration
- Database schema bootstrap on start-up

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.infrastructure.database import ensure_schema
from app.interfaces.books.dependencies import get_engine
from app.interfaces.books.router import router as books_router
from app.interfaces.health import router as health_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: make sure the books table exists."""
    try:
        ensure_schema(get_engine())
    except SQLAlchemyError:
        logger.error(
            "An error occurred while initializing the database.", exc_info=True
        )
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers and error handling.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Error Handling ---
    register_error_handlers(app, include_details=settings.is_development)

    # --- Routers ---
    app.include_router(health_router, prefix="/api")
    app.include_router(books_router, prefix="/api")

    return app


app = create_app()
