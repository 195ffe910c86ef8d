"""Router registry and setup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, generate_latest

from push_service.features.push.router import router as push_router
from push_service.features.tokens.router import router as tokens_router

if TYPE_CHECKING:
    from fastapi import FastAPI

    from push_service.core.settings.app import AppSettings

logger = logging.getLogger(__name__)

metrics_router = APIRouter(tags=["observability"])


@metrics_router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Expose Prometheus metrics for scraping."""
    return Response(
        content=generate_latest(REGISTRY),
        media_type=CONTENT_TYPE_LATEST,
        headers={"Cache-Control": "no-cache, no-store, must-revalidate"},
    )


def setup_routers(app: FastAPI, app_settings: AppSettings) -> None:
    """Register all feature routers with the application.

    Args:
        app: FastAPI application instance.
        app_settings: Application settings providing the API prefix.
    """
    api_prefix = app_settings.api_prefix
    app.include_router(push_router, prefix=api_prefix)
    app.include_router(tokens_router, prefix=api_prefix)

    if app_settings.metrics_enabled:
        app.include_router(metrics_router)

    logger.debug("Routers registered", extra={"api_prefix": api_prefix})
