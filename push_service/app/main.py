"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from push_service.app.exception_handlers import configure_exception_handlers
from push_service.app.lifespan import lifespan
from push_service.app.middleware import configure_middleware
from push_service.app.router import setup_routers
from push_service.core.settings import get_app_settings


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app_settings = get_app_settings()

    app = FastAPI(
        title=app_settings.title,
        version=app_settings.version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )

    configure_exception_handlers(app)
    configure_middleware(app)
    setup_routers(app, app_settings)

    return app
