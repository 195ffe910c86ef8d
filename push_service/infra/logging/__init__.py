"""Logging infrastructure.

Structured JSONL logging with automatic context injection:

    import logging

    from push_service.infra.logging import set_log_context

    logger = logging.getLogger(__name__)

    set_log_context(request_id="abc-123")
    logger.info("Publishing push")  # Includes request_id
"""

from push_service.infra.logging.config import (
    configure_logging,
    setup_logging,
    shutdown,
)
from push_service.infra.logging.context import (
    ContextBoundLogger,
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    get_logger,
    remove_from_log_context,
    set_log_context,
)
from push_service.infra.logging.formatters import JSONFormatter

__all__ = [
    "ContextBoundLogger",
    "ContextInjectingFilter",
    "JSONFormatter",
    "clear_log_context",
    "configure_logging",
    "get_log_context",
    "get_logger",
    "remove_from_log_context",
    "set_log_context",
    "setup_logging",
    "shutdown",
]
