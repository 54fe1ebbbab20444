"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from agora.application.projection import CommentView, project_comment
from agora.domain.error import NotFoundError
from agora.domain.service import (
    CommentService,
    NotificationService,
    PostService,
    UserService,
)
from agora.domain.value import CommentId, PostId, UserId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    text: str = Field(min_length=1, max_length=10000)
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentUseCase:
    """Use case for commenting on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service (author handle lookup)
            notification_service: Reply notifications
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service
        self.notification_service = notification_service

    async def execute(self, request: CreateCommentRequest) -> CommentView:
        """Execute create comment flow.

        Steps:
        1. Resolve the author, the post and (for replies) the parent comment
        2. Create the comment via comment service
        3. Bump the post's comment count
        4. Notify the post author or parent comment author (best effort)

        Raises:
            NotFoundError: If the author, post or parent doesn't exist
            ValidationError: If the parent belongs to another post
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))

        post_id = PostId(UUID(request.post_id))
        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", request.post_id)

        parent = None
        if request.parent_id:
            parent = await self.comment_service.get_parent(
                CommentId(UUID(request.parent_id))
            )

        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author_id=author.id,
            author_handle=author.handle,
            text=request.text,
            parent=parent,
        )

        await self.post_service.increment_comment_count(post_id)

        await self.notification_service.notify_reply(comment, post, parent)

        return project_comment(comment, author.id)
