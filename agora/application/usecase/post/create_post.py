"""Create post use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from agora.application.projection import PostView, project_post
from agora.domain.service import CommunityService, PostService, UserService
from agora.domain.value import CommunityName, UserId


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str = Field(min_length=1, max_length=300)
    text: str = Field(min_length=1, max_length=40000)
    url: str | None = None
    community: str = Field(min_length=1, max_length=50)
    author_id: str  # User ID from authenticated user


class CreatePostUseCase:
    """Use case for submitting a post to a community."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        community_service: CommunityService,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service (author handle lookup)
            community_service: Community domain service (target must exist)
        """
        self.post_service = post_service
        self.user_service = user_service
        self.community_service = community_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The new post as seen by its author

        Raises:
            NotFoundError: If the author or the community doesn't exist
            ValueError: If the community name is malformed
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))
        # Names are matched case-insensitively
        community = await self.community_service.get_community(
            CommunityName(request.community.strip().lower())
        )

        post = await self.post_service.create_post(
            author_id=author.id,
            author_handle=author.handle,
            title=request.title,
            text=request.text,
            community=community.name.root,
            url=request.url,
        )
        return project_post(post, author.id)
