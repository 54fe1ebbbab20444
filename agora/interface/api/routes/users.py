"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from agora.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from agora.domain.error import NotFoundError
from agora.domain.service import JWTService
from agora.domain.value import Handle
from agora.interface.api.auth import require_user_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/me", response_model=GetUserProfileResponse)
async def get_my_profile(
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetUserProfileResponse:
    """Get the authenticated user's profile, including karma."""
    user_id = require_user_id(jwt_service, auth_token, "view your profile")

    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(user_id=user_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
        )


@router.get("/{handle}", response_model=GetUserProfileResponse)
async def get_user_profile(
    handle: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> GetUserProfileResponse:
    """Get user profile by handle.

    Args:
        handle: User handle (e.g., "alice")
        get_user_profile_use_case: Get user profile use case from DI

    Returns:
        Public profile with karma

    Raises:
        HTTPException: If user not found
    """
    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(handle=Handle(handle))
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
