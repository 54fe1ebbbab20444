"""Post repository interface."""

from abc import abstractmethod
from typing import List, Optional

from agora.domain.model.post import Post
from agora.domain.repository.votable import VotableRepository
from agora.domain.value import PostId, PostSort


class PostRepository(VotableRepository[Post]):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_all(
        self,
        sort: PostSort = PostSort.NEW,
        community: Optional[str] = None,
        limit: int = 25,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts with filtering and pagination.

        Args:
            sort: Sort order (new or top)
            community: Filter by community name (None for all)
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, community: Optional[str] = None) -> int:
        """Count posts, optionally within one community."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a new post.

        Vote state of an existing post is only ever written through
        ``compare_and_set_votes``.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment the post's comment count by 1.

        Args:
            post_id: The post ID
        """
        pass
