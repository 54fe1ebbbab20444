"""Comment repository interface."""

from abc import abstractmethod
from typing import List

from agora.domain.model.comment import Comment
from agora.domain.repository.votable import VotableRepository
from agora.domain.value import PostId


class CommentRepository(VotableRepository[Comment]):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first.

        Args:
            post_id: The post ID

        Returns:
            List of comments in creation order
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass
