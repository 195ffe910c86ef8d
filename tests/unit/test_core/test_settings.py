"""Unit tests for the push service settings."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from push_service.core.exceptions import ConfigurationError
from push_service.core.schemas.common import Platform, TopicKind
from push_service.core.settings.aws import AwsSettings
from push_service.core.settings.loader import clear_all_caches, get_push_settings
from push_service.core.settings.logs import LoggingSettings
from push_service.core.settings.push import PushSettings
from push_service.core.settings.tokens import TokenStoreSettings


@pytest.mark.unit
class TestPushSettings:
    """Test suite for PushSettings."""

    def test_reads_prefixed_env_var(self, monkeypatch):
        monkeypatch.setenv("PUSH_ALL_TOPIC_ARN", "arn:aws:sns:eu-west-1:1:prefixed")

        settings = PushSettings()

        assert settings.all_topic_arn == "arn:aws:sns:eu-west-1:1:prefixed"
        assert settings.broadcast_configured is True

    def test_reads_legacy_env_var(self, monkeypatch):
        monkeypatch.delenv("PUSH_ALL_TOPIC_ARN", raising=False)
        monkeypatch.setenv("ALL_TOPIC_ARN", "arn:aws:sns:eu-west-1:1:legacy")

        assert PushSettings().all_topic_arn == "arn:aws:sns:eu-west-1:1:legacy"

    def test_missing_topic_raises_configuration_error(self, monkeypatch):
        monkeypatch.delenv("PUSH_ALL_TOPIC_ARN", raising=False)
        monkeypatch.delenv("ALL_TOPIC_ARN", raising=False)

        settings = PushSettings()

        assert settings.broadcast_configured is False
        with pytest.raises(ConfigurationError) as exc_info:
            settings.require_broadcast_topic()
        assert exc_info.value.setting == "PUSH_ALL_TOPIC_ARN"
        assert exc_info.value.status_code == 500

    def test_both_platforms_default_to_apns(self):
        settings = PushSettings(all_topic_arn="arn")

        assert settings.topic_kind_for(Platform.IOS) is TopicKind.APNS
        assert settings.topic_kind_for(Platform.ANDROID) is TopicKind.APNS

    def test_platform_topic_kind_is_configurable(self, monkeypatch):
        monkeypatch.setenv("PUSH_ANDROID_TOPIC_KIND", "fcm")

        settings = PushSettings()

        assert settings.topic_kind_for(Platform.ANDROID) is TopicKind.FCM
        assert settings.topic_kind_for(Platform.IOS) is TopicKind.APNS

    def test_settings_are_frozen(self):
        settings = PushSettings(all_topic_arn="arn")

        with pytest.raises(ValidationError):
            settings.all_topic_arn = "other"

    def test_loader_is_cached(self):
        first = get_push_settings()

        assert get_push_settings() is first
        clear_all_caches()
        assert get_push_settings() is not first


@pytest.mark.unit
class TestTokenStoreSettings:
    """Test suite for TokenStoreSettings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TOKENS_TABLE_NAME", raising=False)

        settings = TokenStoreSettings()

        assert settings.table_name == "push-tokens"
        assert settings.max_concurrency == 10
        assert settings.fail_fast is True

    def test_concurrency_must_be_positive(self):
        with pytest.raises(ValidationError):
            TokenStoreSettings(max_concurrency=0)


@pytest.mark.unit
class TestAwsSettings:
    """Test suite for AwsSettings."""

    def test_static_credentials_passed_to_session(self):
        settings = AwsSettings(
            region="ap-northeast-2",
            access_key_id="AKIA-TEST",
            secret_access_key="secret",
        )

        assert settings.session_kwargs() == {
            "region_name": "ap-northeast-2",
            "aws_access_key_id": "AKIA-TEST",
            "aws_secret_access_key": "secret",
        }

    def test_default_chain_without_credentials(self, monkeypatch):
        monkeypatch.delenv("AWS_ACCESS_KEY_ID", raising=False)
        monkeypatch.delenv("AWS_SECRET_ACCESS_KEY", raising=False)

        settings = AwsSettings(region="us-west-2")

        assert settings.has_static_credentials is False
        assert settings.session_kwargs() == {"region_name": "us-west-2"}

    def test_endpoint_url_in_client_kwargs(self):
        settings = AwsSettings(endpoint_url="http://localhost:4566")

        kwargs = settings.client_kwargs()

        assert kwargs["endpoint_url"] == "http://localhost:4566"
        assert "config" in kwargs


@pytest.mark.unit
class TestLoggingSettings:
    """Test suite for LoggingSettings."""

    def test_level_is_normalized(self):
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_to_logging_kwargs(self):
        settings = LoggingSettings(level="WARNING", console_level="ERROR", json_logs=False)

        kwargs = settings.to_logging_kwargs()

        assert kwargs["log_level"] == "WARNING"
        assert kwargs["console_level"] == "ERROR"
        assert kwargs["file_level"] == "WARNING"
        assert kwargs["json_logs"] is False
        assert kwargs["file_path"] is None
