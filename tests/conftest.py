"""Pytest configuration and shared fixtures.

Organization:
    - Environment: safe defaults so settings load without real AWS
    - Settings Fixtures: explicit settings objects and cache reset
    - Provider Fixtures: mocked SNS publisher and token table
    - Data Fixtures: DynamoDB item factories
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

# Ensure tests run without external infrastructure
os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("PUSH_ALL_TOPIC_ARN", "arn:aws:sns:us-east-1:123456789012:all-users")
os.environ.setdefault("TOKENS_TABLE_NAME", "push-tokens-test")
os.environ.setdefault("LOG_FILE_PATH", "")

TOPIC_ARN = os.environ["PUSH_ALL_TOPIC_ARN"]
ENDPOINT_ARN = "arn:aws:sns:us-east-1:123456789012:endpoint/APNS/app/1a2b3c"


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clear_settings_caches() -> Iterator[None]:
    """Reset cached settings and service singletons around every test."""
    from push_service.core.settings import clear_all_caches
    from push_service.features.push.service import get_push_dispatcher
    from push_service.features.tokens.service import get_token_lookup_service

    clear_all_caches()
    get_push_dispatcher.cache_clear()
    get_token_lookup_service.cache_clear()
    yield
    clear_all_caches()
    get_push_dispatcher.cache_clear()
    get_token_lookup_service.cache_clear()


@pytest.fixture
def push_settings():
    """Push settings with a broadcast topic configured."""
    from push_service.core.settings.push import PushSettings

    return PushSettings(all_topic_arn=TOPIC_ARN)


@pytest.fixture
def token_settings():
    """Token table settings with a small concurrency cap."""
    from push_service.core.settings.tokens import TokenStoreSettings

    return TokenStoreSettings(table_name="push-tokens-test", max_concurrency=4)


# ============================================================================
# Provider Fixtures
# ============================================================================


@pytest.fixture
def mock_publisher() -> MagicMock:
    """Mock SNS publisher that accepts every publish."""
    publisher = MagicMock()
    publisher.publish_to_endpoint = AsyncMock(return_value={"MessageId": "msg-endpoint-1"})
    publisher.publish_to_topic = AsyncMock(return_value={"MessageId": "msg-topic-1"})
    return publisher


@pytest.fixture
def mock_table() -> MagicMock:
    """Mock token table returning no items by default."""
    table = MagicMock()
    table.query_by_user_id = AsyncMock(return_value={"Items": []})
    table.query_by_device_token = AsyncMock(return_value={"Items": []})
    table.delete_token = AsyncMock(return_value=None)
    return table


def mock_aws_session(client: Any) -> MagicMock:
    """Build a mock aioboto3 session whose ``client()`` yields ``client``."""
    session = MagicMock()
    session.client.return_value.__aenter__.return_value = client
    session.client.return_value.__aexit__.return_value = False
    return session


@pytest.fixture
def session_factory() -> Callable[[Any], MagicMock]:
    """Factory for mock aioboto3 sessions wrapping a mocked client."""
    return mock_aws_session


# ============================================================================
# Data Fixtures
# ============================================================================


def build_item(
    pk: str = "user#user-1",
    sk: str = "deviceToken#token-1",
    platform: str = "iOS",
    endpoint_arn: str = ENDPOINT_ARN,
    created_at: str = "2024-05-01T09:30:00.000Z",
    subscription_arn: str = "arn:aws:sns:us-east-1:123456789012:all-users:sub-1",
) -> dict[str, Any]:
    """Build a low-level DynamoDB token item."""
    return {
        "pk": {"S": pk},
        "sk": {"S": sk},
        "platform": {"S": platform},
        "endpointArn": {"S": endpoint_arn},
        "createdAt": {"S": created_at},
        "subscriptionArn": {"S": subscription_arn},
    }


@pytest.fixture
def item_factory() -> Callable[..., dict[str, Any]]:
    """Factory for DynamoDB token items."""
    return build_item
