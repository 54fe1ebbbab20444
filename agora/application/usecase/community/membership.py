"""Join and leave community use cases."""

from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import CommunityService
from agora.domain.value import CommunityName, UserId

from .get_community import CommunityView


class MembershipRequest(BaseModel):
    """Join or leave request."""

    name: str
    user_id: str  # From authenticated user


class MembershipResponse(BaseModel):
    """Outcome of a join or leave."""

    message: str
    community: CommunityView


class JoinCommunityUseCase:
    """Use case for joining a community."""

    def __init__(self, community_service: CommunityService) -> None:
        self.community_service = community_service

    async def execute(self, request: MembershipRequest) -> MembershipResponse:
        """Join the community.

        Raises:
            NotFoundError: If no community has that name
            MembershipError: If the user is already a member
        """
        community = await self.community_service.join(
            CommunityName(request.name), UserId(UUID(request.user_id))
        )
        return MembershipResponse(
            message="Successfully joined community",
            community=CommunityView.from_community(community, is_member=True),
        )


class LeaveCommunityUseCase:
    """Use case for leaving a community."""

    def __init__(self, community_service: CommunityService) -> None:
        self.community_service = community_service

    async def execute(self, request: MembershipRequest) -> MembershipResponse:
        """Leave the community.

        Raises:
            NotFoundError: If no community has that name
            MembershipError: If the user created it or isn't a member
        """
        community = await self.community_service.leave(
            CommunityName(request.name), UserId(UUID(request.user_id))
        )
        return MembershipResponse(
            message="Successfully left community",
            community=CommunityView.from_community(community, is_member=False),
        )
