"""Get user profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from agora.domain.model import User
from agora.domain.service import UserService
from agora.domain.value import Handle, UserId


class GetUserProfileRequest(BaseModel):
    """Get user profile request.

    Exactly one of ``handle`` (public profile) or ``user_id`` (``/users/me``)
    is given.
    """

    handle: Handle | None = None
    user_id: str | None = None

    def model_post_init(self, __context):
        """Validate that exactly one lookup key is provided."""
        if (self.handle is None) == (self.user_id is None):
            raise ValueError("Provide either handle or user_id")


class GetUserProfileResponse(BaseModel):
    """Get user profile response."""

    user_id: str
    handle: Handle
    avatar_url: str | None
    bio: str | None
    karma: int
    created_at: datetime


class GetUserProfileUseCase:
    """Use case for getting a user's profile, including karma."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        user: User
        if request.handle is not None:
            user = await self.user_service.get_by_handle(request.handle)
        else:
            user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        return GetUserProfileResponse(
            user_id=str(user.id),
            handle=user.handle,
            avatar_url=user.avatar_url,
            bio=user.bio,
            karma=user.karma,
            created_at=user.created_at,
        )
