"""Strict decoding of stored token records.

DynamoDB returns loosely typed attribute maps. ``decode_token_record``
either produces a fully typed ``DecodedTokenRecord`` or a
``RecordRejection`` naming the offending field; it never coerces.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from push_service.infra.aws.dynamodb import KEY_DELIMITER

REQUIRED_ATTRIBUTES = (
    "pk",
    "sk",
    "platform",
    "endpointArn",
    "createdAt",
    "subscriptionArn",
)


@dataclass(frozen=True)
class DecodedTokenRecord:
    """A validated record with both composite keys decoded.

    ``partition_value`` and ``sort_value`` are the parts after the key
    prefix; which one is the user ID depends on the view that was queried.
    """

    partition_value: str
    sort_value: str
    platform: str
    endpoint_arn: str
    created_at: str
    subscription_arn: str


@dataclass(frozen=True)
class RecordRejection:
    """Why a record failed validation."""

    field: str
    reason: str


def split_composite_key(key: str) -> str | None:
    """Return the value part of a ``kind#value`` key.

    Returns None unless the key contains exactly one delimiter.
    """
    parts = key.split(KEY_DELIMITER)
    if len(parts) != 2:
        return None
    return parts[1]


def _string_attribute(item: Mapping[str, Any], name: str) -> str | None:
    attribute = item.get(name)
    if not isinstance(attribute, Mapping):
        return None
    value = attribute.get("S")
    return value if isinstance(value, str) else None


def decode_token_record(item: Mapping[str, Any]) -> DecodedTokenRecord | RecordRejection:
    """Validate a low-level DynamoDB item and decode its composite keys.

    Args:
        item: Attribute-value map, e.g. ``{"pk": {"S": "user#123"}, ...}``.

    Returns:
        DecodedTokenRecord, or RecordRejection for the first failing field.
    """
    values: dict[str, str] = {}
    for name in REQUIRED_ATTRIBUTES:
        value = _string_attribute(item, name)
        if value is None:
            return RecordRejection(field=name, reason=f"{name} is missing or not a string attribute")
        values[name] = value

    decoded_keys: dict[str, str] = {}
    for name in ("pk", "sk"):
        decoded = split_composite_key(values[name])
        if decoded is None:
            return RecordRejection(
                field=name,
                reason=f"{name} must contain exactly one '{KEY_DELIMITER}'",
            )
        decoded_keys[name] = decoded

    return DecodedTokenRecord(
        partition_value=decoded_keys["pk"],
        sort_value=decoded_keys["sk"],
        platform=values["platform"],
        endpoint_arn=values["endpointArn"],
        created_at=values["createdAt"],
        subscription_arn=values["subscriptionArn"],
    )
