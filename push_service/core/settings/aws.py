"""AWS connection settings shared by the SNS and DynamoDB clients.

Environment variables use AWS_ prefix.
Example: AWS_REGION="ap-northeast-2"
         AWS_ENDPOINT_URL="http://localhost:4566"

Leave the credentials unset to use the default botocore credential chain
(instance profile, task role, shared config).
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, SecretStr, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AwsSettings(BaseSettings):
    """AWS client settings."""

    region: str = Field(
        default="us-east-1",
        min_length=1,
        description="AWS region for SNS and DynamoDB",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Override endpoint URL (LocalStack). None for AWS.",
    )
    access_key_id: SecretStr | None = Field(
        default=None,
        description="AWS access key ID (None to use the default credential chain)",
    )
    secret_access_key: SecretStr | None = Field(
        default=None,
        description="AWS secret access key",
    )
    max_attempts: int = Field(
        default=3,
        ge=1,
        le=10,
        description="botocore retry attempts per call",
    )
    retry_mode: str = Field(
        default="standard",
        description="botocore retry mode: standard, adaptive, or legacy",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_static_credentials(self) -> bool:
        """Check if an explicit key pair is configured."""
        return self.access_key_id is not None and self.secret_access_key is not None

    def session_kwargs(self) -> dict[str, Any]:
        """Return kwargs for ``aioboto3.Session``."""
        kwargs: dict[str, Any] = {"region_name": self.region}
        if self.has_static_credentials:
            kwargs["aws_access_key_id"] = self.access_key_id.get_secret_value()  # type: ignore[union-attr]
            kwargs["aws_secret_access_key"] = self.secret_access_key.get_secret_value()  # type: ignore[union-attr]
        return kwargs

    def client_kwargs(self) -> dict[str, Any]:
        """Return kwargs for ``session.client(...)``."""
        from botocore.config import Config

        kwargs: dict[str, Any] = {
            "config": Config(
                retries={"max_attempts": self.max_attempts, "mode": self.retry_mode},
            ),
        }
        if self.endpoint_url:
            kwargs["endpoint_url"] = self.endpoint_url
        return kwargs

    model_config = SettingsConfigDict(
        env_prefix="AWS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
        env_ignore_empty=True,
    )
