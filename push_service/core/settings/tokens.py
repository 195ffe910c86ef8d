"""Token table settings.

Environment variables use TOKENS_ prefix.
Example: TOKENS_TABLE_NAME="push-tokens"
         TOKENS_MAX_CONCURRENCY=20
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TokenStoreSettings(BaseSettings):
    """DynamoDB token table settings."""

    table_name: str = Field(
        default="push-tokens",
        min_length=3,
        max_length=255,
        description="DynamoDB table holding user/device token records",
    )
    max_concurrency: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum concurrent lookups issued by a batch lookup",
    )
    fail_fast: bool = Field(
        default=True,
        description=(
            "Abort a batch on the first failing lookup. When false, every lookup "
            "runs and all failures are reported together."
        ),
    )

    model_config = SettingsConfigDict(
        env_prefix="TOKENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )
