"""Unit tests for TokenLookupService."""
from __future__ import annotations

import asyncio

import pytest

from push_service.core.exceptions import (
    BatchLookupError,
    MalformedQueryResultError,
    TokenRecordError,
    TokenStoreError,
)
from push_service.core.settings.tokens import TokenStoreSettings
from push_service.features.tokens.schemas import DeviceToken, UserToken
from push_service.features.tokens.service import TokenLookupService


@pytest.fixture
def service(mock_table, token_settings) -> TokenLookupService:
    return TokenLookupService(mock_table, token_settings)


def _items_by_user(item_factory, known: set[str]):
    async def query(user_id: str):
        if user_id not in known:
            return {"Items": []}
        return {"Items": [item_factory(pk=f"user#{user_id}", sk=f"deviceToken#tok-{user_id}")]}

    return query


class TestSingleLookups:
    """Test lookups of one key."""

    async def test_get_token_by_user(self, service, mock_table, item_factory):
        mock_table.query_by_user_id.return_value = {"Items": [item_factory()]}

        token = await service.get_token_by_user("user-1")

        assert isinstance(token, UserToken)
        assert token.user_id == "user-1"
        assert token.device_token == "token-1"
        assert token.entity == "user"
        mock_table.query_by_user_id.assert_awaited_once_with("user-1")

    async def test_get_user_by_token_reverses_mapping(self, service, mock_table, item_factory):
        mock_table.query_by_device_token.return_value = {
            "Items": [item_factory(pk="deviceToken#token-1", sk="user#user-1")]
        }

        token = await service.get_user_by_token("token-1")

        assert isinstance(token, DeviceToken)
        assert token.device_token == "token-1"
        assert token.user_id == "user-1"
        assert token.entity == "deviceToken"

    async def test_no_items_returns_none(self, service):
        assert await service.get_token_by_user("nobody") is None

    async def test_first_item_wins(self, service, mock_table, item_factory):
        mock_table.query_by_user_id.return_value = {
            "Items": [
                item_factory(sk="deviceToken#first"),
                item_factory(sk="deviceToken#second"),
            ]
        }

        token = await service.get_token_by_user("user-1")

        assert token.device_token == "first"

    async def test_missing_items_raises(self, service, mock_table):
        mock_table.query_by_user_id.return_value = {"Count": 0}

        with pytest.raises(MalformedQueryResultError) as exc_info:
            await service.get_token_by_user("user-1")

        assert exc_info.value.extra == {"lookup": "user", "key": "user-1"}

    async def test_invalid_record_raises(self, service, mock_table, item_factory):
        item = item_factory()
        del item["endpointArn"]
        mock_table.query_by_device_token.return_value = {"Items": [item]}

        with pytest.raises(TokenRecordError) as exc_info:
            await service.get_user_by_token("token-1")

        assert exc_info.value.field == "endpointArn"
        assert exc_info.value.status_code == 502


class TestBatchLookups:
    """Test concurrent lookups of many keys."""

    async def test_preserves_input_order_and_omits_unknown(
        self, service, mock_table, item_factory
    ):
        mock_table.query_by_user_id.side_effect = _items_by_user(item_factory, {"a", "c", "d"})

        tokens = await service.find_tokens_by_users(["d", "b", "a", "c"])

        assert [token.user_id for token in tokens] == ["d", "a", "c"]

    async def test_empty_input(self, service, mock_table):
        assert await service.find_users_by_tokens([]) == []
        mock_table.query_by_device_token.assert_not_awaited()

    async def test_concurrency_is_capped(self, service, mock_table, token_settings):
        in_flight = 0
        peak = 0

        async def query(user_id: str):
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return {"Items": []}

        mock_table.query_by_user_id.side_effect = query

        await service.find_tokens_by_users([f"user-{i}" for i in range(20)])

        assert peak == token_settings.max_concurrency

    async def test_fail_fast_raises_first_error_and_cancels_rest(self, service, mock_table):
        completed: list[str] = []

        async def query(user_id: str):
            if user_id == "bad":
                raise TokenStoreError("table unavailable")
            await asyncio.sleep(1)
            completed.append(user_id)
            return {"Items": []}

        mock_table.query_by_user_id.side_effect = query

        with pytest.raises(TokenStoreError, match="table unavailable"):
            await service.find_tokens_by_users(["u1", "bad", "u2"])

        await asyncio.sleep(0)
        assert completed == []

    async def test_collect_mode_reports_every_failure(self, mock_table, item_factory):
        service = TokenLookupService(
            mock_table, TokenStoreSettings(table_name="push-tokens-test", fail_fast=False)
        )
        good = _items_by_user(item_factory, {"ok"})

        async def query(user_id: str):
            if user_id.startswith("bad"):
                return {"Count": 0}
            return await good(user_id)

        mock_table.query_by_user_id.side_effect = query

        with pytest.raises(BatchLookupError) as exc_info:
            await service.find_tokens_by_users(["ok", "bad-1", "bad-2"])

        assert set(exc_info.value.failures) == {"bad-1", "bad-2"}
        assert all(
            isinstance(exc, MalformedQueryResultError) for exc in exc_info.value.failures.values()
        )
        assert mock_table.query_by_user_id.await_count == 3


class TestDeleteUser:
    async def test_delete_delegates_to_table(self, service, mock_table):
        await service.delete_user("token-1", "user-1")

        mock_table.delete_token.assert_awaited_once_with("token-1", "user-1")

    async def test_delete_error_propagates(self, service, mock_table):
        mock_table.delete_token.side_effect = TokenStoreError("transaction cancelled")

        with pytest.raises(TokenStoreError):
            await service.delete_user("token-1", "user-1")
