"""API router for the push feature.

Endpoints:
- POST /push/platform - Push to a single device endpoint
- POST /push/all - Push to every device subscribed to the broadcast topic
"""

from __future__ import annotations

from fastapi import APIRouter

from push_service.features.push.dependencies import PushDispatcherDep
from push_service.features.push.schemas import (
    AllTopicPushRequest,
    PlatformPushRequest,
    PushResponse,
)

router = APIRouter(prefix="/push", tags=["push"])


@router.post(
    "/platform",
    response_model=PushResponse,
    summary="Push to one device",
    description="Publish a notification directly to a device's SNS platform endpoint.",
)
async def push_platform(
    payload: PlatformPushRequest,
    dispatcher: PushDispatcherDep,
) -> PushResponse:
    result = await dispatcher.push_to_platform(payload.message, payload.target)
    return PushResponse.from_result(result)


@router.post(
    "/all",
    response_model=PushResponse,
    summary="Broadcast push",
    description="Publish a notification to the broadcast topic.",
)
async def push_all(
    payload: AllTopicPushRequest,
    dispatcher: PushDispatcherDep,
) -> PushResponse:
    result = await dispatcher.push_to_all_topic(payload.message)
    return PushResponse.from_result(result)
