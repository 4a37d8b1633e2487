"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (products, health)
- Error handlers (two-stage failure-to-HTTP translation)
- Security middleware (headers, rate limiting)
- Logging configuration
- The MongoDB connection, opened and closed by the lifespan

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from products_api.core.config import Settings, settings
from products_api.infrastructure.products.mongo_connection import MongoConnection
from products_api.infrastructure.products.product_repository import (
    MongoProductRepository,
)
from products_api.interfaces.health import router as health_router
from products_api.interfaces.products.router import router as products_router
from products_api.shared.errors.handlers import register_error_handlers
from products_api.shared.logging import configure_logging
from products_api.shared.security.headers import SecurityHeadersMiddleware
from products_api.shared.security.rate_limiting import install_rate_limiting

logger = logging.getLogger(__name__)


def _build_lifespan(app_settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the database before serving and always close it afterwards."""
        connection = MongoConnection(
            url=app_settings.require_mongo_url(),
            database_name=app_settings.mongo_db,
            timeout_ms=app_settings.mongo_timeout_ms,
        )
        with connection:
            repository = MongoProductRepository(
                connection.collection(app_settings.mongo_collection)
            )
            repository.ensure_indexes()
            app.state.mongo = connection
            app.state.product_repository = repository
            try:
                yield
            finally:
                app.state.product_repository = None
                app.state.mongo = None

    return lifespan


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        app_settings: Settings override, mostly for tests.
            Defaults to the module-level settings loaded from the environment.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    configure_logging(level=app_settings.log_level)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=_build_lifespan(app_settings),
    )
    app.state.settings = app_settings

    # --- Rate Limiting ---
    install_rate_limiting(app, app_settings)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(products_router)

    logger.debug("Application created: %s %s", app_settings.project_name, app_settings.version)
    return app


app = create_app()
