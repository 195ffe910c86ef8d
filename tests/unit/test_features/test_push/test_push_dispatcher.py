"""Unit tests for PushDispatcher."""
from __future__ import annotations

import json

import pytest

from push_service.core.exceptions import ConfigurationError
from push_service.core.settings.push import PushSettings
from push_service.features.push.schemas import PushMessage, PushResult, PushTarget
from push_service.features.push.service import PushDispatcher

ENDPOINT = "arn:aws:sns:us-east-1:123456789012:endpoint/APNS/app/device-1"


@pytest.fixture
def message() -> PushMessage:
    return PushMessage(title="Order shipped", content="On its way", deep_link="app://orders/1")


@pytest.fixture
def dispatcher(push_settings, mock_publisher) -> PushDispatcher:
    return PushDispatcher(push_settings, mock_publisher)


class TestPushToPlatform:
    """Test direct pushes to a device endpoint."""

    async def test_ios_publishes_apns_document(self, dispatcher, mock_publisher, message):
        result = await dispatcher.push_to_platform(
            message, PushTarget(endpoint_arn=ENDPOINT, platform="iOS")
        )

        assert result == PushResult(message_id="msg-endpoint-1")
        arn, document = mock_publisher.publish_to_endpoint.await_args.args
        assert arn == ENDPOINT
        assert set(json.loads(document)) == {"default", "APNS", "APNS_SANDBOX"}
        mock_publisher.publish_to_topic.assert_not_awaited()

    async def test_android_uses_configured_topic_kind(self, mock_publisher, message):
        settings = PushSettings(all_topic_arn="arn:topic", android_topic_kind="fcm")
        dispatcher = PushDispatcher(settings, mock_publisher)

        await dispatcher.push_to_platform(
            message, PushTarget(endpoint_arn=ENDPOINT, platform="Android")
        )

        _, document = mock_publisher.publish_to_endpoint.await_args.args
        assert set(json.loads(document)) == {"default", "GCM"}

    async def test_unknown_platform_returns_none(self, dispatcher, mock_publisher, message):
        result = await dispatcher.push_to_platform(
            message, PushTarget(endpoint_arn=ENDPOINT, platform="Windows")
        )

        assert result is None
        mock_publisher.publish_to_endpoint.assert_not_awaited()

    async def test_platform_is_case_sensitive(self, dispatcher, mock_publisher, message):
        result = await dispatcher.push_to_platform(
            message, PushTarget(endpoint_arn=ENDPOINT, platform="ios")
        )

        assert result is None

    @pytest.mark.parametrize("response", [None, {}, {"ResponseMetadata": {}}])
    async def test_missing_message_id_returns_none(
        self, dispatcher, mock_publisher, message, response
    ):
        mock_publisher.publish_to_endpoint.return_value = response

        result = await dispatcher.push_to_platform(
            message, PushTarget(endpoint_arn=ENDPOINT, platform="iOS")
        )

        assert result is None


class TestPushToAllTopic:
    """Test broadcast pushes."""

    async def test_publishes_all_sections_to_topic(
        self, dispatcher, mock_publisher, message, push_settings
    ):
        result = await dispatcher.push_to_all_topic(message)

        assert result == PushResult(message_id="msg-topic-1")
        arn, document = mock_publisher.publish_to_topic.await_args.args
        assert arn == push_settings.all_topic_arn
        assert set(json.loads(document)) == {"default", "APNS", "APNS_SANDBOX", "GCM"}

    async def test_missing_topic_raises_configuration_error(
        self, mock_publisher, message, monkeypatch
    ):
        monkeypatch.delenv("PUSH_ALL_TOPIC_ARN", raising=False)
        monkeypatch.delenv("ALL_TOPIC_ARN", raising=False)
        settings = PushSettings(_env_file=None, require_all_topic=False)
        dispatcher = PushDispatcher(settings, mock_publisher)

        with pytest.raises(ConfigurationError) as exc_info:
            await dispatcher.push_to_all_topic(message)

        assert exc_info.value.detail == "ALL_TOPIC_ARN is not defined"
        mock_publisher.publish_to_topic.assert_not_awaited()

    async def test_provider_rejection_returns_none(self, dispatcher, mock_publisher, message):
        mock_publisher.publish_to_topic.return_value = None

        assert await dispatcher.push_to_all_topic(message) is None
