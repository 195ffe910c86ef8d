"""Context management for structured logging.

Injects contextvars-held fields (request IDs, user IDs, endpoint ARNs) into
every log record, so they reach the formatter without being passed to each
logging call. Async-safe: every task sees its own copy of the context.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any

_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


def set_log_context(**kwargs: Any) -> None:
    """Set logging context for the current async task.

    Args:
        **kwargs: Key-value pairs to add to logging context.

    Example:
        ```python
        set_log_context(request_id="abc-123", path="/api/v1/push/all")
        logger.info("Publishing")  # Includes request_id and path
        ```
    """
    current = _log_context.get().copy()
    current.update(kwargs)
    _log_context.set(current)


def get_log_context() -> dict[str, Any]:
    """Get a copy of the current logging context."""
    return _log_context.get().copy()


def clear_log_context() -> None:
    """Clear all logging context for the current async task."""
    _log_context.set({})


def remove_from_log_context(*keys: str) -> None:
    """Remove specific keys from logging context."""
    current = _log_context.get().copy()
    for key in keys:
        current.pop(key, None)
    _log_context.set(current)


class ContextInjectingFilter(logging.Filter):
    """Logging filter that injects the current log context into each record.

    Attached to the root queue handler by ``configure_logging`` so every logger
    benefits without code changes.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in _log_context.get().items():
            # Explicit extra= fields win over ambient context
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


class ContextBoundLogger(logging.LoggerAdapter):
    """Logger adapter that binds permanent context to a logger instance.

    Example:
        ```python
        logger = get_logger(__name__, component="push")
        logger.info("Published", extra={"message_id": "m-1"})  # Has component too
        ```
    """

    def __init__(self, logger: logging.Logger, **context: Any) -> None:
        super().__init__(logger, context)

    def bind(self, **context: Any) -> ContextBoundLogger:
        """Create a new logger with additional bound context."""
        merged = {**self.extra, **context}
        return ContextBoundLogger(self.logger, **merged)

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        extra = kwargs.get("extra", {})
        kwargs["extra"] = {**self.extra, **extra}
        return msg, kwargs


def get_logger(name: str, **context: Any) -> ContextBoundLogger:
    """Get a logger with bound context.

    Args:
        name: Logger name.
        **context: Context to add to all log messages.

    Returns:
        Logger adapter with context.
    """
    return ContextBoundLogger(logging.getLogger(name), **context)
