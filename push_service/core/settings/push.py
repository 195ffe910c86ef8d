"""Push dispatch settings.

Environment variables use PUSH_ prefix.
Example: PUSH_ALL_TOPIC_ARN="arn:aws:sns:us-east-1:123456789012:all"

``ALL_TOPIC_ARN`` is accepted as an alias for deployments that predate the
prefix.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from push_service.core.exceptions import ConfigurationError
from push_service.core.schemas.common import Platform, TopicKind


class PushSettings(BaseSettings):
    """SNS push dispatch settings."""

    all_topic_arn: str | None = Field(
        default=None,
        validation_alias=AliasChoices("PUSH_ALL_TOPIC_ARN", "ALL_TOPIC_ARN"),
        description="SNS topic ARN used for broadcast pushes",
    )
    require_all_topic: bool = Field(
        default=True,
        description="Fail at startup when the broadcast topic ARN is unset",
    )

    # iOS and Android both publish with the APNS topic kind in production.
    # Kept configurable until product confirms whether Android should use FCM.
    ios_topic_kind: TopicKind = Field(
        default=TopicKind.APNS,
        description="Topic kind used when building iOS messages",
    )
    android_topic_kind: TopicKind = Field(
        default=TopicKind.APNS,
        description="Topic kind used when building Android messages",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def broadcast_configured(self) -> bool:
        """Check if the broadcast topic ARN is available."""
        return bool(self.all_topic_arn)

    def topic_kind_for(self, platform: Platform) -> TopicKind:
        """Return the configured topic kind for a platform."""
        if platform is Platform.IOS:
            return self.ios_topic_kind
        return self.android_topic_kind

    def require_broadcast_topic(self) -> str:
        """Return the broadcast topic ARN.

        Raises:
            ConfigurationError: If the ARN is not configured.
        """
        if not self.all_topic_arn:
            raise ConfigurationError(
                "ALL_TOPIC_ARN is not defined",
                setting="PUSH_ALL_TOPIC_ARN",
            )
        return self.all_topic_arn

    model_config = SettingsConfigDict(
        env_prefix="PUSH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        env_ignore_empty=True,
    )
