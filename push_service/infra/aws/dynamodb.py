"""DynamoDB token table client.

Both views of a user/device relation live in one table under a ``pk``/``sk``
key pair of composite keys:

    user view:   pk="user#<userId>"          sk="deviceToken#<deviceToken>"
    device view: pk="deviceToken#<token>"    sk="user#<userId>"

Queries return the raw low-level response (``Items`` of attribute-value
maps); validating those items is the lookup service's job.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from botocore.exceptions import ClientError

from push_service.core.exceptions import TokenStoreError
from push_service.infra.aws.session import AwsClientBase

if TYPE_CHECKING:
    from push_service.core.settings.aws import AwsSettings

logger = logging.getLogger(__name__)

KEY_DELIMITER = "#"
USER_KEY_PREFIX = "user"
DEVICE_TOKEN_KEY_PREFIX = "deviceToken"


def composite_key(kind: str, value: str) -> str:
    """Encode ``kind`` and ``value`` as a stored composite key."""
    return f"{kind}{KEY_DELIMITER}{value}"


class TokenTable(AwsClientBase):
    """Async wrapper around the token table.

    Example:
        table = TokenTable(get_aws_settings(), table_name="push-tokens")
        output = await table.query_by_user_id("123")
        items = output.get("Items")
    """

    service_name = "dynamodb"

    def __init__(self, settings: AwsSettings, table_name: str) -> None:
        super().__init__(settings)
        self.table_name = table_name

    async def query_by_user_id(self, user_id: str) -> dict[str, Any]:
        """Query the user view for ``user_id``."""
        return await self._query(composite_key(USER_KEY_PREFIX, user_id))

    async def query_by_device_token(self, device_token: str) -> dict[str, Any]:
        """Query the device view for ``device_token``."""
        return await self._query(composite_key(DEVICE_TOKEN_KEY_PREFIX, device_token))

    async def delete_token(self, device_token: str, user_id: str) -> None:
        """Delete both views of the relation between a device and a user.

        Deleting an absent item is not an error, so no existence check is made.

        Raises:
            TokenStoreError: If DynamoDB rejects the transaction.
        """
        user_key = composite_key(USER_KEY_PREFIX, user_id)
        device_key = composite_key(DEVICE_TOKEN_KEY_PREFIX, device_token)
        try:
            async with self._client() as dynamodb:
                await dynamodb.transact_write_items(
                    TransactItems=[
                        {
                            "Delete": {
                                "TableName": self.table_name,
                                "Key": {"pk": {"S": user_key}, "sk": {"S": device_key}},
                            }
                        },
                        {
                            "Delete": {
                                "TableName": self.table_name,
                                "Key": {"pk": {"S": device_key}, "sk": {"S": user_key}},
                            }
                        },
                    ]
                )
        except ClientError as e:
            logger.exception(
                "Failed to delete token",
                extra={"table": self.table_name, "user_key": user_key, "device_key": device_key},
            )
            raise TokenStoreError(
                f"Failed to delete token for {user_key}: {e}",
                extra={"table": self.table_name},
            ) from e

        logger.info(
            "Token deleted",
            extra={"table": self.table_name, "user_key": user_key, "device_key": device_key},
        )

    async def _query(self, partition_key: str) -> dict[str, Any]:
        try:
            async with self._client() as dynamodb:
                return await dynamodb.query(
                    TableName=self.table_name,
                    KeyConditionExpression="pk = :pk",
                    ExpressionAttributeValues={":pk": {"S": partition_key}},
                )
        except ClientError as e:
            logger.exception(
                "Token table query failed",
                extra={"table": self.table_name, "pk": partition_key},
            )
            raise TokenStoreError(
                f"Failed to query {partition_key}: {e}",
                extra={"table": self.table_name},
            ) from e


__all__ = [
    "DEVICE_TOKEN_KEY_PREFIX",
    "KEY_DELIMITER",
    "USER_KEY_PREFIX",
    "TokenTable",
    "composite_key",
]
