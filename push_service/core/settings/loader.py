"""LRU-cached settings loaders.

Settings are loaded and validated once, then cached for the lifetime of the process.

Usage:
    from push_service.core.settings.loader import get_push_settings

    settings = get_push_settings()  # First call: loads and validates
    settings = get_push_settings()  # Subsequent calls: returns cached instance

Testing:
    In tests, clear the caches to force reload:
    clear_all_caches()

    Or construct settings directly:
    settings = PushSettings(all_topic_arn="arn:aws:sns:...")
"""

from __future__ import annotations

from functools import lru_cache

from .app import AppSettings
from .aws import AwsSettings
from .logs import LoggingSettings
from .push import PushSettings
from .tokens import TokenStoreSettings


@lru_cache(maxsize=1)
def get_app_settings() -> AppSettings:
    """Get cached application settings.

    Returns:
        Validated and frozen AppSettings instance.
    """
    return AppSettings()


@lru_cache(maxsize=1)
def get_aws_settings() -> AwsSettings:
    """Get cached AWS client settings.

    Returns:
        Validated and frozen AwsSettings instance.
    """
    return AwsSettings()


@lru_cache(maxsize=1)
def get_push_settings() -> PushSettings:
    """Get cached push dispatch settings.

    Returns:
        Validated and frozen PushSettings instance.
    """
    return PushSettings()


@lru_cache(maxsize=1)
def get_token_store_settings() -> TokenStoreSettings:
    """Get cached token table settings.

    Returns:
        Validated and frozen TokenStoreSettings instance.
    """
    return TokenStoreSettings()


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings.

    Returns:
        Validated and frozen LoggingSettings instance.
    """
    return LoggingSettings()


def clear_all_caches() -> None:
    """Clear every settings cache (useful in tests)."""
    get_app_settings.cache_clear()
    get_aws_settings.cache_clear()
    get_push_settings.cache_clear()
    get_token_store_settings.cache_clear()
    get_logging_settings.cache_clear()
