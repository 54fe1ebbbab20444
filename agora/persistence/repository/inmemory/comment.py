"""In-memory comment repository for testing."""

from agora.domain.model.comment import Comment
from agora.domain.repository.comment import CommentRepository
from agora.domain.value import PostId

from .votable import InMemoryVotableStore


class InMemoryCommentRepository(InMemoryVotableStore[Comment], CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._items.values() if c.post_id == post_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._items[comment.id] = comment
        return comment
