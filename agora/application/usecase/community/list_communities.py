"""List communities and name availability use cases."""

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from agora.domain.service import CommunityService
from agora.domain.value import CommunityName, CommunitySort

from .get_community import CommunityView


class ListCommunitiesRequest(BaseModel):
    """List communities request."""

    sort: CommunitySort = CommunitySort.NEW
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListCommunitiesResponse(BaseModel):
    """List communities response."""

    communities: list[CommunityView]
    total: int
    limit: int
    offset: int


class ListCommunitiesUseCase:
    """Use case for browsing communities, newest or most popular first."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize list communities use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(self, request: ListCommunitiesRequest) -> ListCommunitiesResponse:
        communities, total = await self.community_service.list_communities(
            sort=request.sort, limit=request.limit, offset=request.offset
        )
        return ListCommunitiesResponse(
            communities=[CommunityView.from_community(c) for c in communities],
            total=total,
            limit=request.limit,
            offset=request.offset,
        )


class CheckCommunityNameRequest(BaseModel):
    """Name availability request."""

    name: str


class NameAvailability(BaseModel):
    """Whether a community name can be claimed."""

    name: str
    available: bool
    message: str


class CheckCommunityNameUseCase:
    """Use case for checking a name before creating a community."""

    def __init__(self, community_service: CommunityService) -> None:
        self.community_service = community_service

    async def execute(self, request: CheckCommunityNameRequest) -> NameAvailability:
        """Malformed names are reported as unavailable rather than rejected."""
        try:
            name = CommunityName(request.name)
        except PydanticValidationError as e:
            return NameAvailability(
                name=request.name,
                available=False,
                message=e.errors()[0]["msg"].removeprefix("Value error, "),
            )

        if await self.community_service.is_name_available(name):
            return NameAvailability(
                name=request.name, available=True, message="Name is available"
            )
        return NameAvailability(
            name=request.name,
            available=False,
            message="Community name already exists",
        )
