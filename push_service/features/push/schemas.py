"""Pydantic schemas for the push feature."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PushMessage(BaseModel):
    """Platform-agnostic notification content."""

    title: str = Field(min_length=1, max_length=200, description="Notification title")
    content: str = Field(min_length=1, max_length=4000, description="Notification body")
    deep_link: str | None = Field(
        default=None, max_length=2000, description="In-app deep link opened on tap",
    )
    web_link: str | None = Field(
        default=None, max_length=2000, description="Web URL opened on tap",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Order shipped",
                "content": "Your order #1024 is on its way.",
                "deep_link": "app://orders/1024",
            }
        },
    )


class PushTarget(BaseModel):
    """Delivery address of a single device.

    ``platform`` is a plain string: values outside ``Platform`` are accepted
    here and rejected by the dispatcher, which logs them and returns None.
    """

    endpoint_arn: str = Field(min_length=1, description="SNS platform endpoint ARN")
    platform: str = Field(description="Device platform (iOS or Android)")


class PushResult(BaseModel):
    """Successful publish carrying the provider-issued message identifier."""

    message_id: str


class PlatformPushRequest(BaseModel):
    """Request body for a direct push to one device."""

    message: PushMessage
    target: PushTarget


class AllTopicPushRequest(BaseModel):
    """Request body for a broadcast push."""

    message: PushMessage


class PushResponse(BaseModel):
    """Outcome of a push request.

    ``delivered`` is False when the provider accepted nothing: no message ID,
    a rejected publish, or an unsupported platform.
    """

    delivered: bool
    message_id: str | None = None

    @classmethod
    def from_result(cls, result: PushResult | None) -> PushResponse:
        if result is None:
            return cls(delivered=False)
        return cls(delivered=True, message_id=result.message_id)
