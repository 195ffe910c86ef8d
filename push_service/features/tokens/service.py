"""Token lookup service.

Resolves user IDs to device tokens and device tokens to user IDs through the
token table. Invalid or malformed data raises; a lookup that matches nothing
returns None.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from functools import lru_cache
from time import perf_counter
from typing import TYPE_CHECKING, Any, TypeVar

from push_service.core.exceptions import (
    BatchLookupError,
    MalformedQueryResultError,
    TokenRecordError,
)
from push_service.core.settings import get_aws_settings, get_token_store_settings
from push_service.features.tokens.decoding import (
    DecodedTokenRecord,
    RecordRejection,
    decode_token_record,
)
from push_service.features.tokens.metrics import (
    token_batch_lookup_duration_seconds,
    token_deleted_total,
    token_lookup_total,
)
from push_service.features.tokens.schemas import DeviceToken, UserToken
from push_service.infra.aws.dynamodb import TokenTable

if TYPE_CHECKING:
    from push_service.core.settings.tokens import TokenStoreSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TokenLookupService:
    """Reads and deletes user/device token records.

    Batch lookups run one query per key, at most ``max_concurrency`` at a
    time, and return only the keys that matched, in input order. With
    ``fail_fast`` the first failing lookup fails the batch; otherwise every
    lookup completes and all failures are raised together as
    ``BatchLookupError``. Partial results are never returned.
    """

    def __init__(self, table: TokenTable, settings: TokenStoreSettings) -> None:
        self.table = table
        self.settings = settings

    async def get_token_by_user(self, user_id: str) -> UserToken | None:
        """Look up the token registered for ``user_id``.

        Raises:
            MalformedQueryResultError: If the query result has no item collection.
            TokenRecordError: If the matching record is invalid.
        """
        output = await self.table.query_by_user_id(user_id)
        record = self._first_record(output, lookup="user", key=user_id)
        if record is None:
            return None
        return UserToken(
            user_id=record.partition_value,
            device_token=record.sort_value,
            platform=record.platform,
            endpoint_arn=record.endpoint_arn,
            created_at=record.created_at,
            subscription_arn=record.subscription_arn,
        )

    async def get_user_by_token(self, device_token: str) -> DeviceToken | None:
        """Look up the user registered for ``device_token``.

        Raises:
            MalformedQueryResultError: If the query result has no item collection.
            TokenRecordError: If the matching record is invalid.
        """
        output = await self.table.query_by_device_token(device_token)
        record = self._first_record(output, lookup="device", key=device_token)
        if record is None:
            return None
        return DeviceToken(
            device_token=record.partition_value,
            user_id=record.sort_value,
            platform=record.platform,
            endpoint_arn=record.endpoint_arn,
            created_at=record.created_at,
            subscription_arn=record.subscription_arn,
        )

    async def find_tokens_by_users(self, user_ids: Sequence[str]) -> list[UserToken]:
        """Resolve many user IDs; users without a token are omitted."""
        return await self._lookup_many(user_ids, self.get_token_by_user, lookup="user")

    async def find_users_by_tokens(self, device_tokens: Sequence[str]) -> list[DeviceToken]:
        """Resolve many device tokens; unknown tokens are omitted."""
        return await self._lookup_many(device_tokens, self.get_user_by_token, lookup="device")

    async def delete_user(self, device_token: str, user_id: str) -> None:
        """Delete the record linking ``device_token`` and ``user_id``.

        No existence check is made; deleting an absent record succeeds.
        """
        await self.table.delete_token(device_token, user_id)
        token_deleted_total.inc()

    def _first_record(
        self,
        output: dict[str, Any],
        lookup: str,
        key: str,
    ) -> DecodedTokenRecord | None:
        items = output.get("Items")
        if items is None:
            token_lookup_total.labels(lookup=lookup, outcome="malformed_result").inc()
            raise MalformedQueryResultError(lookup, key)

        if not items:
            token_lookup_total.labels(lookup=lookup, outcome="not_found").inc()
            return None

        decoded = decode_token_record(items[0])
        if isinstance(decoded, RecordRejection):
            token_lookup_total.labels(lookup=lookup, outcome="invalid_record").inc()
            logger.error(
                "Invalid token record",
                extra={"lookup": lookup, "key": key, "field": decoded.field, "reason": decoded.reason},
            )
            raise TokenRecordError(lookup, key, decoded.field, decoded.reason)

        token_lookup_total.labels(lookup=lookup, outcome="found").inc()
        return decoded

    async def _lookup_many(
        self,
        keys: Sequence[str],
        lookup_one: Callable[[str], Awaitable[T | None]],
        lookup: str,
    ) -> list[T]:
        start = perf_counter()
        semaphore = asyncio.Semaphore(self.settings.max_concurrency)

        async def bounded(key: str) -> T | None:
            async with semaphore:
                return await lookup_one(key)

        tasks = [asyncio.ensure_future(bounded(key)) for key in keys]
        try:
            if self.settings.fail_fast:
                results: list[Any] = await asyncio.gather(*tasks)
            else:
                results = await asyncio.gather(*tasks, return_exceptions=True)
        except Exception:
            for task in tasks:
                task.cancel()
            raise
        finally:
            token_batch_lookup_duration_seconds.labels(lookup=lookup).observe(
                perf_counter() - start
            )

        failures = {
            key: result for key, result in zip(keys, results) if isinstance(result, Exception)
        }
        if failures:
            logger.error(
                "Batch lookup failed",
                extra={"lookup": lookup, "failed": len(failures), "total": len(keys)},
            )
            raise BatchLookupError(lookup, failures)

        found = [result for result in results if result is not None]
        logger.debug(
            "Batch lookup completed",
            extra={"lookup": lookup, "requested": len(keys), "found": len(found)},
        )
        return found


@lru_cache(maxsize=1)
def get_token_lookup_service() -> TokenLookupService:
    """Get the process-wide lookup service built from cached settings."""
    settings = get_token_store_settings()
    table = TokenTable(get_aws_settings(), table_name=settings.table_name)
    return TokenLookupService(table, settings)
