"""Post domain service."""

from uuid import uuid4

import logfire

from agora.domain.model.common import utcnow
from agora.domain.model.post import Post
from agora.domain.repository import PostRepository
from agora.domain.value import Handle, PostId, PostSort, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(
        self,
        author_id: UserId,
        author_handle: Handle,
        title: str,
        text: str,
        community: str,
        url: str | None = None,
    ) -> Post:
        """Create a new post with an empty vote state.

        Args:
            author_id: Author user ID
            author_handle: Author handle
            title: Post title
            text: Post body
            community: Community the post is submitted to
            url: Optional external link

        Returns:
            Created post
        """
        with logfire.span(
            "post_service.create_post",
            author_id=str(author_id),
            community=community,
        ):
            now = utcnow()
            post = Post(
                id=PostId(uuid4()),
                author_id=author_id,
                author_handle=author_handle,
                title=title,
                text=text,
                url=url,
                community=community,
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), community=community)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if post:
                logfire.info("Post found", post_id=str(post_id))
            else:
                logfire.warn("Post not found", post_id=str(post_id))
            return post

    async def list_posts(
        self,
        sort: PostSort = PostSort.NEW,
        community: str | None = None,
        limit: int = 25,
        offset: int = 0,
    ) -> tuple[list[Post], int]:
        """List posts with pagination.

        Returns:
            Tuple of (page of posts, total matching)
        """
        with logfire.span(
            "post_service.list_posts",
            sort=sort.value,
            community=community,
            limit=limit,
            offset=offset,
        ):
            posts = await self.post_repository.find_all(
                sort=sort, community=community, limit=limit, offset=offset
            )
            total = await self.post_repository.count(community=community)
            logfire.info("Posts listed", count=len(posts), total=total)
            return posts, total

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment the post's comment count.

        Args:
            post_id: Post ID
        """
        with logfire.span(
            "post_service.increment_comment_count", post_id=str(post_id)
        ):
            await self.post_repository.increment_comment_count(post_id)
