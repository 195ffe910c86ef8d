"""AWS SNS publisher.

Publishes pre-built ``MessageStructure=json`` documents either directly to a
platform endpoint or to a topic for fan-out.

Usage:
    publisher = SnsPublisher(get_aws_settings())
    response = await publisher.publish_to_endpoint(endpoint_arn, message)
    if response and "MessageId" in response:
        ...
"""

from __future__ import annotations

import logging
from typing import Any

from botocore.exceptions import ClientError

from push_service.infra.aws.session import AwsClientBase

logger = logging.getLogger(__name__)


class SnsPublisher(AwsClientBase):
    """Async SNS publish wrapper.

    Rejections reported by SNS (``ClientError``: disabled endpoint, unknown
    ARN, throttling after retries) are logged and returned as ``None``.
    Transport errors propagate to the caller.
    """

    service_name = "sns"

    async def publish_to_endpoint(self, endpoint_arn: str, message: str) -> dict[str, Any] | None:
        """Publish a message to a single platform endpoint.

        Args:
            endpoint_arn: Platform application endpoint ARN of the device.
            message: JSON message document with per-platform sections.

        Returns:
            SNS publish response, or None if SNS rejected the call.
        """
        return await self._publish(TargetArn=endpoint_arn, Message=message)

    async def publish_to_topic(self, topic_arn: str, message: str) -> dict[str, Any] | None:
        """Publish a message to a topic, reaching every subscribed endpoint.

        Args:
            topic_arn: SNS topic ARN.
            message: JSON message document with per-platform sections.

        Returns:
            SNS publish response, or None if SNS rejected the call.
        """
        return await self._publish(TopicArn=topic_arn, Message=message)

    async def _publish(self, **params: Any) -> dict[str, Any] | None:
        target = params.get("TargetArn") or params.get("TopicArn")
        try:
            async with self._client() as sns:
                response = await sns.publish(MessageStructure="json", **params)
        except ClientError as e:
            logger.exception(
                "SNS publish rejected",
                extra={
                    "target_arn": target,
                    "error_code": e.response.get("Error", {}).get("Code"),
                },
            )
            return None

        logger.debug(
            "SNS publish accepted",
            extra={"target_arn": target, "message_id": response.get("MessageId")},
        )
        return response


__all__ = ["SnsPublisher"]
