"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.projection import PostView, project_post
from agora.domain.error import NotFoundError
from agora.domain.service import PostService
from agora.domain.value import PostId, UserId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string
    viewer_id: str | None = None  # Current user ID (if authenticated)


class GetPostUseCase:
    """Use case for retrieving one post with the viewer's vote."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostView:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post_id = PostId(UUID(request.post_id))
        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", request.post_id)

        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
        return project_post(post, viewer_id)
