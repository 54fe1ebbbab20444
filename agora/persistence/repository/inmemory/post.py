"""In-memory post repository for testing."""

from typing import Optional

from agora.domain.model.post import Post
from agora.domain.repository.post import PostRepository
from agora.domain.value import PostId, PostSort

from .votable import InMemoryVotableStore


class InMemoryPostRepository(InMemoryVotableStore[Post], PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def _filtered(self, community: Optional[str]) -> list[Post]:
        posts = list(self._items.values())
        if community:
            posts = [p for p in posts if p.community == community]
        return posts

    async def find_all(
        self,
        sort: PostSort = PostSort.NEW,
        community: Optional[str] = None,
        limit: int = 25,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts with filtering and pagination."""
        posts = self._filtered(community)

        if sort == PostSort.TOP:
            posts.sort(key=lambda p: (p.score, p.created_at), reverse=True)
        else:
            posts.sort(key=lambda p: p.created_at, reverse=True)

        return posts[offset : offset + limit]

    async def count(self, community: Optional[str] = None) -> int:
        """Count posts, optionally within one community."""
        return len(self._filtered(community))

    async def save(self, post: Post) -> Post:
        """Save a post."""
        self._items[post.id] = post
        return post

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Increment comment_count by 1."""
        post = self._items.get(post_id)
        if post:
            self._items[post_id] = post.model_copy(
                update={"comment_count": post.comment_count + 1}
            )
