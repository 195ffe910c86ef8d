"""FastAPI dependencies for the token lookup feature."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from push_service.features.tokens.service import (
    TokenLookupService,
    get_token_lookup_service,
)

TokenLookupServiceDep = Annotated[TokenLookupService, Depends(get_token_lookup_service)]

__all__ = ["TokenLookupServiceDep"]
