"""Modular Pydantic Settings v2 configuration.

One settings model per domain (app/aws/push/tokens/logging), each read from
environment variables with its own prefix and an optional ``.env`` file.

Import settings via cached loaders:
    from push_service.core.settings import get_push_settings

Configuration precedence (highest to lowest):
    1. init kwargs (testing/overrides)
    2. Environment variables (production)
    3. .env file (development only)
"""

from __future__ import annotations

from .app import AppSettings
from .aws import AwsSettings
from .loader import (
    clear_all_caches,
    get_app_settings,
    get_aws_settings,
    get_logging_settings,
    get_push_settings,
    get_token_store_settings,
)
from .logs import LoggingSettings
from .push import PushSettings
from .tokens import TokenStoreSettings

__all__ = [
    "AppSettings",
    "AwsSettings",
    "LoggingSettings",
    "PushSettings",
    "TokenStoreSettings",
    "clear_all_caches",
    "get_app_settings",
    "get_aws_settings",
    "get_logging_settings",
    "get_push_settings",
    "get_token_store_settings",
]
