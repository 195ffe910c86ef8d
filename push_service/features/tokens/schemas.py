"""Pydantic schemas for the token lookup feature."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class UserToken(BaseModel):
    """Token record seen from the user side (looked up by user ID)."""

    user_id: str
    device_token: str
    entity: Literal["user"] = "user"
    platform: str
    endpoint_arn: str
    created_at: str
    subscription_arn: str

    model_config = ConfigDict(frozen=True)


class DeviceToken(BaseModel):
    """Token record seen from the device side (looked up by device token)."""

    device_token: str
    user_id: str
    entity: Literal["deviceToken"] = "deviceToken"
    platform: str
    endpoint_arn: str
    created_at: str
    subscription_arn: str

    model_config = ConfigDict(frozen=True)


class UserTokenLookupRequest(BaseModel):
    """Batch lookup of tokens by user IDs."""

    user_ids: list[str] = Field(
        min_length=1,
        max_length=1000,
        description="User IDs to resolve; unknown IDs are omitted from the result",
    )


class DeviceTokenLookupRequest(BaseModel):
    """Batch lookup of users by device tokens."""

    device_tokens: list[str] = Field(
        min_length=1,
        max_length=1000,
        description="Device tokens to resolve; unknown tokens are omitted from the result",
    )
