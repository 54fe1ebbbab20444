"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional
from uuid import UUID

import logfire
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Comment
from agora.domain.repository import CommentRepository
from agora.domain.value import PostId
from agora.persistence.mappers import comment_to_dict, row_to_comment
from agora.persistence.repository.votable import compare_and_set_votes
from agora.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, content_id: UUID) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == content_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def compare_and_set_votes(
        self, content: Comment, expected_version: int
    ) -> bool:
        """Write the comment's vote state if its version is unchanged."""
        with logfire.span(
            "comment_repository.compare_and_set_votes",
            comment_id=str(content.id),
            expected_version=expected_version,
        ):
            return await compare_and_set_votes(
                self.session, comments_table, content, expected_version
            )

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment
