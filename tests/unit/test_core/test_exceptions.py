"""Unit tests for the application exception hierarchy."""
from __future__ import annotations

import pytest

from push_service.core.exceptions import (
    AppException,
    BatchLookupError,
    ConfigurationError,
    MalformedQueryResultError,
    NotFoundException,
    TokenRecordError,
    TokenStoreError,
)


@pytest.mark.unit
class TestExceptions:
    """Test RFC 7807 fields carried by each exception."""

    def test_default_title_from_status(self):
        exc = AppException(status_code=502, detail="upstream broke")

        assert exc.title == "Bad Gateway"
        assert str(exc) == "upstream broke"

    def test_not_found(self):
        exc = NotFoundException("missing", extra={"user_id": "1"})

        assert exc.status_code == 404
        assert exc.extra == {"user_id": "1"}

    def test_configuration_error_names_setting(self):
        exc = ConfigurationError("ALL_TOPIC_ARN is not defined", setting="PUSH_ALL_TOPIC_ARN")

        assert exc.type == "configuration-error"
        assert exc.extra["setting"] == "PUSH_ALL_TOPIC_ARN"

    def test_malformed_query_result(self):
        exc = MalformedQueryResultError("user", "user-1")

        assert isinstance(exc, TokenStoreError)
        assert exc.status_code == 502
        assert exc.extra == {"lookup": "user", "key": "user-1"}

    def test_token_record_error(self):
        exc = TokenRecordError("device", "token-1", "pk", "pk must contain exactly one '#'")

        assert exc.type == "invalid-token-record"
        assert exc.field == "pk"
        assert "pk must contain" in exc.detail

    def test_batch_lookup_error_lists_failures(self):
        failures = {"a": ValueError("boom"), "c": RuntimeError("bang")}

        exc = BatchLookupError("user", failures)

        assert exc.failures is failures
        assert exc.extra["failures"] == {"a": "boom", "c": "bang"}
        assert exc.detail == "2 user lookup(s) failed in batch"
