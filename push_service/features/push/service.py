"""Push dispatch service.

Builds SNS message documents from push DTOs and publishes them either to a
single device endpoint or to the broadcast topic. Publish results are
normalized to ``PushResult`` or ``None``; configuration errors raise.
"""

from __future__ import annotations

from functools import lru_cache
from time import perf_counter
from typing import TYPE_CHECKING, Any

from push_service.core.schemas.common import Platform, TopicKind
from push_service.core.settings import get_aws_settings, get_push_settings
from push_service.features.push.messages import build_message
from push_service.features.push.metrics import (
    push_publish_duration_seconds,
    push_published_total,
    push_unsupported_platform_total,
)
from push_service.features.push.schemas import PushMessage, PushResult, PushTarget
from push_service.infra.aws.sns import SnsPublisher
from push_service.infra.logging import get_logger

if TYPE_CHECKING:
    from push_service.core.settings.push import PushSettings


def _parse_platform(value: str) -> Platform | None:
    try:
        return Platform(value)
    except ValueError:
        return None


class PushDispatcher:
    """Dispatches push notifications through SNS.

    Example:
        dispatcher = PushDispatcher(PushSettings(all_topic_arn=arn), publisher)
        result = await dispatcher.push_to_platform(message, target)
        if result is None:
            ...  # provider accepted nothing; caller decides on retry
    """

    def __init__(self, settings: PushSettings, publisher: SnsPublisher) -> None:
        self.settings = settings
        self.publisher = publisher
        self._logger = get_logger(__name__, component="push")

    async def push_to_platform(
        self,
        message: PushMessage,
        target: PushTarget,
    ) -> PushResult | None:
        """Publish ``message`` directly to one device endpoint.

        Args:
            message: Notification content.
            target: Endpoint ARN and platform of the device.

        Returns:
            PushResult with the SNS message ID, or None when the platform is
            not supported or SNS returned no message ID.
        """
        platform = _parse_platform(target.platform)
        if platform is None:
            push_unsupported_platform_total.inc()
            self._logger.error(
                "platform push error: platform is not defined",
                extra={
                    "platform": target.platform,
                    "endpoint_arn": target.endpoint_arn,
                    "title": message.title,
                },
            )
            return None

        document = build_message(
            self.settings.topic_kind_for(platform),
            title=message.title,
            content=message.content,
            deep_link=message.deep_link,
            web_link=message.web_link,
        )
        return await self._publish(target.endpoint_arn, document)

    async def push_to_all_topic(self, message: PushMessage) -> PushResult | None:
        """Publish ``message`` to the broadcast topic.

        Raises:
            ConfigurationError: If the broadcast topic ARN is not configured.
        """
        document = build_message(
            TopicKind.ALL,
            title=message.title,
            content=message.content,
            deep_link=message.deep_link,
            web_link=message.web_link,
        )
        topic_arn = self.settings.require_broadcast_topic()
        return await self._publish(topic_arn, document, broadcast=True)

    async def _publish(
        self,
        target_arn: str,
        document: str,
        broadcast: bool = False,
    ) -> PushResult | None:
        target = "topic" if broadcast else "endpoint"
        start = perf_counter()
        response: dict[str, Any] | None
        if broadcast:
            response = await self.publisher.publish_to_topic(target_arn, document)
        else:
            response = await self.publisher.publish_to_endpoint(target_arn, document)
        push_publish_duration_seconds.labels(target=target).observe(perf_counter() - start)

        if not response or response.get("MessageId") is None:
            push_published_total.labels(target=target, outcome="no_message_id").inc()
            self._logger.warning(
                "Push publish returned no message ID",
                extra={"target_arn": target_arn, "broadcast": broadcast},
            )
            return None

        push_published_total.labels(target=target, outcome="delivered").inc()
        self._logger.info(
            "Push published",
            extra={
                "target_arn": target_arn,
                "broadcast": broadcast,
                "message_id": response["MessageId"],
            },
        )
        return PushResult(message_id=response["MessageId"])


@lru_cache(maxsize=1)
def get_push_dispatcher() -> PushDispatcher:
    """Get the process-wide dispatcher built from cached settings."""
    return PushDispatcher(get_push_settings(), SnsPublisher(get_aws_settings()))
