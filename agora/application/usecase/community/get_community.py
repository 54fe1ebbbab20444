"""Get community use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from agora.domain.model import Community
from agora.domain.service import CommunityService
from agora.domain.value import CommunityName, UserId


class CommunityView(BaseModel):
    """Community as seen by one viewer."""

    community_id: str
    name: CommunityName
    display_name: str
    description: str
    url: str
    created_by: str
    member_count: int
    is_public: bool
    is_member: bool
    created_at: datetime

    @classmethod
    def from_community(
        cls, community: Community, is_member: bool = False
    ) -> "CommunityView":
        return cls(
            community_id=str(community.id),
            name=community.name,
            display_name=community.display_name,
            description=community.description,
            url=community.url,
            created_by=str(community.created_by),
            member_count=community.member_count,
            is_public=community.is_public,
            is_member=is_member,
            created_at=community.created_at,
        )


class GetCommunityRequest(BaseModel):
    """Get community request."""

    name: str
    viewer_id: str | None = None  # Current user ID (if authenticated)


class GetCommunityUseCase:
    """Use case for a community's front page header."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize get community use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(self, request: GetCommunityRequest) -> CommunityView:
        """Execute get community flow.

        Signed-in viewers also learn whether they are members.

        Raises:
            NotFoundError: If no community has that name
            ValueError: If the name is malformed
        """
        community = await self.community_service.get_community(
            CommunityName(request.name)
        )
        is_member = False
        if request.viewer_id:
            is_member = await self.community_service.is_member(
                community, UserId(UUID(request.viewer_id))
            )
        return CommunityView.from_community(community, is_member)
