"""Entry point for running the push service with uvicorn."""

from __future__ import annotations

import sys
from typing import NoReturn


def run() -> NoReturn:
    """Run the FastAPI application server."""
    import uvicorn

    from push_service.core.settings import get_app_settings, get_logging_settings

    settings = get_app_settings()
    log_settings = get_logging_settings()

    uvicorn.run(
        "push_service.app.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        access_log=settings.debug,
        log_level=log_settings.level.lower(),
    )
    sys.exit(0)


if __name__ == "__main__":
    run()
