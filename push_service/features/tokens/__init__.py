"""Device token lookup feature."""

from __future__ import annotations

from push_service.features.tokens.schemas import DeviceToken, UserToken
from push_service.features.tokens.service import (
    TokenLookupService,
    get_token_lookup_service,
)

__all__ = [
    "DeviceToken",
    "TokenLookupService",
    "UserToken",
    "get_token_lookup_service",
]
