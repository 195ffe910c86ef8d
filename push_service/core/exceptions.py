"""Custom exception classes for the push service."""

from __future__ import annotations

from typing import Any


class AppException(Exception):
    """Base application exception.

    All custom exceptions should inherit from this class.
    Follows RFC 7807 Problem Details for HTTP APIs.

    Attributes:
        status_code: HTTP status code for the error.
        detail: Human-readable error message.
        type: Error type identifier (used in RFC 7807 problem details).
        title: Short, human-readable summary of the problem type.
        instance: URI reference that identifies the specific occurrence of the problem.
        extra: Additional context-specific information about the error.

    Example:
            raise AppException(
            status_code=502,
            detail="Token table returned a malformed response",
            type="malformed-query-result",
            extra={"lookup": "user", "key": "123"}
        )
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        type: str = "about:blank",
        title: str | None = None,
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize application exception.

        Args:
            status_code: HTTP status code.
            detail: Human-readable error message.
            type: Error type identifier.
            title: Short summary of the problem type.
            instance: URI reference identifying this specific occurrence.
            extra: Additional context about the error.
        """
        self.status_code = status_code
        self.detail = detail
        self.type = type
        self.title = title or self._default_title(status_code)
        self.instance = instance
        self.extra = extra or {}
        super().__init__(detail)

    @staticmethod
    def _default_title(status_code: int) -> str:
        """Get default title for HTTP status code.

        Args:
            status_code: HTTP status code.

        Returns:
            Human-readable title for the status code.
        """
        titles = {
            400: "Bad Request",
            404: "Not Found",
            422: "Unprocessable Entity",
            500: "Internal Server Error",
            502: "Bad Gateway",
            503: "Service Unavailable",
        }
        return titles.get(status_code, "Error")


class NotFoundException(AppException):
    """Exception raised when a resource is not found.

    Example:
            raise NotFoundException(
            detail="No token registered for user 123",
            type="token-not-found",
            extra={"user_id": "123"}
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "not-found",
        instance: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=404,
            detail=detail,
            type=type,
            title="Not Found",
            instance=instance,
            extra=extra,
        )


class ConfigurationError(AppException):
    """Raised when a required configuration value is missing or invalid.

    Configuration errors are not recoverable at the service layer; they are
    raised immediately and never retried.
    """

    def __init__(
        self,
        detail: str,
        setting: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        context = dict(extra or {})
        if setting:
            context["setting"] = setting
        super().__init__(
            status_code=500,
            detail=detail,
            type="configuration-error",
            title="Configuration Error",
            extra=context,
        )
        self.setting = setting


class TokenStoreError(AppException):
    """Base exception for token table contract violations.

    Raised when the token table returns data the lookup service cannot
    trust. Maps to 502 because the fault lies with the upstream store.
    """

    def __init__(
        self,
        detail: str,
        type: str = "token-store-error",
        title: str = "Token Store Error",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=502,
            detail=detail,
            type=type,
            title=title,
            extra=extra,
        )


class MalformedQueryResultError(TokenStoreError):
    """Raised when a query response carries no item collection at all.

    Distinguishes a broken query from a query that matched nothing.
    """

    def __init__(self, lookup: str, key: str) -> None:
        super().__init__(
            detail=f"Query result for {lookup} lookup has no item collection",
            type="malformed-query-result",
            title="Malformed Query Result",
            extra={"lookup": lookup, "key": key},
        )
        self.lookup = lookup
        self.key = key


class TokenRecordError(TokenStoreError):
    """Raised when a stored token record fails shape validation."""

    def __init__(self, lookup: str, key: str, field: str, reason: str) -> None:
        super().__init__(
            detail=f"Token record for {lookup} lookup is invalid: {reason}",
            type="invalid-token-record",
            title="Invalid Token Record",
            extra={"lookup": lookup, "key": key, "field": field, "reason": reason},
        )
        self.lookup = lookup
        self.key = key
        self.field = field
        self.reason = reason


class BatchLookupError(TokenStoreError):
    """Raised when one or more lookups of a batch failed.

    Only raised when the batch runs in collect mode; ``failures`` maps each
    failing key to the exception its lookup raised.
    """

    def __init__(self, lookup: str, failures: dict[str, Exception]) -> None:
        super().__init__(
            detail=f"{len(failures)} {lookup} lookup(s) failed in batch",
            type="batch-lookup-failed",
            title="Batch Lookup Failed",
            extra={
                "lookup": lookup,
                "failures": {key: str(exc) for key, exc in failures.items()},
            },
        )
        self.lookup = lookup
        self.failures = failures
