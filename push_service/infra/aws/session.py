"""Shared aioboto3 session handling for the AWS clients."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any

import aioboto3

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from push_service.core.settings.aws import AwsSettings


class AwsClientBase:
    """Base class for service wrappers built on one aioboto3 session.

    A client is opened per call with ``async with`` so no connection pool
    outlives the event loop that created it.
    """

    service_name: str = ""

    def __init__(self, settings: AwsSettings) -> None:
        self.aws_settings = settings
        self._session = aioboto3.Session(**settings.session_kwargs())

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[Any]:
        async with self._session.client(
            self.service_name, **self.aws_settings.client_kwargs()
        ) as client:
            yield client
