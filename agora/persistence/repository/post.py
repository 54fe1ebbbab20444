"""PostgreSQL implementation of Post repository."""

from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Post
from agora.domain.repository import PostRepository
from agora.domain.value import PostId, PostSort
from agora.persistence.mappers import post_to_dict, row_to_post
from agora.persistence.repository.votable import compare_and_set_votes
from agora.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, content_id: UUID) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(content_id)):
            stmt = select(posts_table).where(posts_table.c.id == content_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def compare_and_set_votes(self, content: Post, expected_version: int) -> bool:
        """Write the post's vote state if its version is unchanged."""
        with logfire.span(
            "post_repository.compare_and_set_votes",
            post_id=str(content.id),
            expected_version=expected_version,
        ):
            return await compare_and_set_votes(
                self.session, posts_table, content, expected_version
            )

    async def find_all(
        self,
        sort: PostSort = PostSort.NEW,
        community: Optional[str] = None,
        limit: int = 25,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts with filtering and pagination."""
        with logfire.span(
            "post_repository.find_all",
            sort=sort.value,
            community=community,
            limit=limit,
            offset=offset,
        ):
            stmt = select(posts_table)

            if community:
                stmt = stmt.where(posts_table.c.community == community)

            if sort == PostSort.TOP:
                stmt = stmt.order_by(
                    desc(posts_table.c.score), desc(posts_table.c.created_at)
                )
            else:
                stmt = stmt.order_by(desc(posts_table.c.created_at))

            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]
            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(self, community: Optional[str] = None) -> int:
        """Count posts, optionally within one community."""
        stmt = select(func.count()).select_from(posts_table)
        if community:
            stmt = stmt.where(posts_table.c.community == community)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Insert a new post."""
        with logfire.span(
            "post_repository.save", post_id=str(post.id), community=post.community
        ):
            stmt = posts_table.insert().values(**post_to_dict(post))
            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def increment_comment_count(self, post_id: PostId) -> None:
        """Atomically increment comment_count by 1."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(comment_count=posts_table.c.comment_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
