"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers
- Error handlers (centralized failure-to-HTTP mapping)
- Logging configuration

No business logic belongs here.
"""

import logging

from fastapi import FastAPI

from app.core.config import settings
from app.interfaces.health import router as health_router
from app.shared.errors import ErrorDispatcher, register_error_handlers
from app.shared.logging import configure_logging


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers and error handlers.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(
        level=settings.log_level, error_logger=settings.error_logger_name
    )

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Error Handlers ---
    register_error_handlers(
        app,
        ErrorDispatcher(logger=logging.getLogger(settings.error_logger_name)),
    )

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")

    return app


app = create_app()
