"""Application lifespan management.

Startup: configure logging, then validate configuration so a missing
broadcast topic stops the service before it accepts traffic.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from push_service.core.exceptions import ConfigurationError
from push_service.core.settings import (
    get_app_settings,
    get_push_settings,
    get_token_store_settings,
)
from push_service.infra.logging.config import setup_logging

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

    from push_service.core.settings.push import PushSettings

logger = logging.getLogger(__name__)


def validate_push_settings(settings: PushSettings) -> None:
    """Fail startup when the broadcast topic is required but missing.

    Raises:
        ConfigurationError: If ``require_all_topic`` is set and no ARN is configured.
    """
    if settings.broadcast_configured:
        return
    if settings.require_all_topic:
        raise ConfigurationError(
            "ALL_TOPIC_ARN is not defined",
            setting="PUSH_ALL_TOPIC_ARN",
        )
    logger.warning("Broadcast topic not configured; /push/all will fail")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application startup and shutdown."""
    setup_logging()

    app_settings = get_app_settings()
    push_settings = get_push_settings()
    token_settings = get_token_store_settings()

    validate_push_settings(push_settings)

    logger.info(
        "Starting application",
        extra={
            "service": app_settings.service_name,
            "version": app_settings.version,
            "environment": app_settings.environment,
            "token_table": token_settings.table_name,
            "broadcast_configured": push_settings.broadcast_configured,
        },
    )

    yield

    logger.info("Application shutdown complete", extra={"service": app_settings.service_name})
