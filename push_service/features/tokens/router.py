"""API router for the token lookup feature.

Endpoints:
- GET /tokens/users/{user_id} - Token registered for a user
- GET /tokens/devices/{device_token} - User registered for a device token
- POST /tokens/users/lookup - Batch lookup by user IDs
- POST /tokens/devices/lookup - Batch lookup by device tokens
- DELETE /tokens/devices/{device_token}/users/{user_id} - Delete a registration
"""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from push_service.core.exceptions import NotFoundException
from push_service.features.tokens.dependencies import TokenLookupServiceDep
from push_service.features.tokens.schemas import (
    DeviceToken,
    DeviceTokenLookupRequest,
    UserToken,
    UserTokenLookupRequest,
)

router = APIRouter(prefix="/tokens", tags=["tokens"])


@router.get(
    "/users/{user_id}",
    response_model=UserToken,
    summary="Get token by user",
)
async def get_token_by_user(user_id: str, service: TokenLookupServiceDep) -> UserToken:
    token = await service.get_token_by_user(user_id)
    if token is None:
        raise NotFoundException(
            detail=f"No token registered for user {user_id}",
            type="token-not-found",
            extra={"user_id": user_id},
        )
    return token


@router.get(
    "/devices/{device_token}",
    response_model=DeviceToken,
    summary="Get user by device token",
)
async def get_user_by_token(device_token: str, service: TokenLookupServiceDep) -> DeviceToken:
    token = await service.get_user_by_token(device_token)
    if token is None:
        raise NotFoundException(
            detail="No user registered for device token",
            type="device-token-not-found",
            extra={"device_token": device_token},
        )
    return token


@router.post(
    "/users/lookup",
    response_model=list[UserToken],
    summary="Batch lookup by user IDs",
)
async def find_tokens_by_users(
    payload: UserTokenLookupRequest,
    service: TokenLookupServiceDep,
) -> list[UserToken]:
    return await service.find_tokens_by_users(payload.user_ids)


@router.post(
    "/devices/lookup",
    response_model=list[DeviceToken],
    summary="Batch lookup by device tokens",
)
async def find_users_by_tokens(
    payload: DeviceTokenLookupRequest,
    service: TokenLookupServiceDep,
) -> list[DeviceToken]:
    return await service.find_users_by_tokens(payload.device_tokens)


@router.delete(
    "/devices/{device_token}/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a device registration",
)
async def delete_user(
    device_token: str,
    user_id: str,
    service: TokenLookupServiceDep,
) -> Response:
    await service.delete_user(device_token, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
