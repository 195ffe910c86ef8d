"""FastAPI dependencies for the push feature."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from push_service.features.push.service import PushDispatcher, get_push_dispatcher

PushDispatcherDep = Annotated[PushDispatcher, Depends(get_push_dispatcher)]

__all__ = ["PushDispatcherDep"]
