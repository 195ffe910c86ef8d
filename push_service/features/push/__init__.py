"""Push notification dispatch feature."""

from __future__ import annotations

from push_service.features.push.schemas import PushMessage, PushResult, PushTarget
from push_service.features.push.service import PushDispatcher, get_push_dispatcher

__all__ = [
    "PushDispatcher",
    "PushMessage",
    "PushResult",
    "PushTarget",
    "get_push_dispatcher",
]
