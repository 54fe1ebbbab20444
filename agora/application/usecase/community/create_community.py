"""Create community use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from agora.domain.service import CommunityService, UserService
from agora.domain.value import CommunityName, UserId

from .get_community import CommunityView


class CreateCommunityRequest(BaseModel):
    """Create community request."""

    name: str = Field(min_length=1, max_length=50)
    display_name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str = Field(default="", max_length=500)
    is_public: bool = True
    creator_id: str  # User ID from authenticated user


class CreateCommunityUseCase:
    """Use case for founding a community."""

    def __init__(
        self, community_service: CommunityService, user_service: UserService
    ) -> None:
        """Initialize create community use case.

        Args:
            community_service: Community domain service
            user_service: User domain service (creator lookup)
        """
        self.community_service = community_service
        self.user_service = user_service

    async def execute(self, request: CreateCommunityRequest) -> CommunityView:
        """Execute create community flow.

        Returns:
            The new community; its creator is already a member

        Raises:
            NotFoundError: If the creator doesn't exist
            CommunityNameTakenError: If the name is already in use
            ValueError: If the name is malformed
        """
        name = CommunityName(request.name)
        creator = await self.user_service.get_by_id(UserId(UUID(request.creator_id)))

        community = await self.community_service.create_community(
            creator_id=creator.id,
            name=name,
            display_name=request.display_name,
            description=request.description,
            is_public=request.is_public,
        )
        return CommunityView.from_community(community, is_member=True)
