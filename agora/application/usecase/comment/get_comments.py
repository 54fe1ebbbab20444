"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.projection import CommentView, project_comment
from agora.domain.error import NotFoundError
from agora.domain.service import CommentService, PostService
from agora.domain.value import PostId, UserId


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string
    viewer_id: str | None = None  # Current user ID (if authenticated)


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentView]


class GetCommentsUseCase:
    """Use case for listing a post's comments, oldest first.

    Comments are returned flat; clients rebuild threads from ``parent_id``
    and ``depth``.
    """

    def __init__(
        self, comment_service: CommentService, post_service: PostService
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post_id = PostId(UUID(request.post_id))
        if not await self.post_service.get_post_by_id(post_id):
            raise NotFoundError("Post", request.post_id)

        comments = await self.comment_service.get_comments_for_post(post_id)

        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None
        return GetCommentsResponse(
            post_id=str(post_id),
            comments=[project_comment(c, viewer_id) for c in comments],
        )
