"""List posts use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from agora.application.projection import PostView, project_post
from agora.domain.service import PostService
from agora.domain.value import PostSort, UserId


class ListPostsRequest(BaseModel):
    """List posts request."""

    sort: PostSort = PostSort.NEW
    community: str | None = None
    limit: int = Field(default=25, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    viewer_id: str | None = None  # Current user ID (if authenticated)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostView]
    total: int
    limit: int
    offset: int


class ListPostsUseCase:
    """Use case for listing posts with filtering and pagination."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Each post carries the viewer's vote, read from the post's own vote
        sets, so no extra lookup is needed per page.
        """
        with logfire.span(
            "list_posts.execute",
            sort=request.sort.value,
            community=request.community,
            limit=request.limit,
            offset=request.offset,
        ):
            posts, total = await self.post_service.list_posts(
                sort=request.sort,
                community=request.community,
                limit=request.limit,
                offset=request.offset,
            )

            viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
            return ListPostsResponse(
                posts=[project_post(post, viewer_id) for post in posts],
                total=total,
                limit=request.limit,
                offset=request.offset,
            )
