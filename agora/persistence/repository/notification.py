"""PostgreSQL implementation of Notification repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import delete, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.model import Notification
from agora.domain.repository import NotificationRepository
from agora.domain.value import (
    CommentId,
    NotificationId,
    NotificationKind,
    PostId,
    UserId,
)
from agora.persistence.mappers import notification_to_dict, row_to_notification
from agora.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists_recent(
        self,
        recipient_id: UserId,
        kind: NotificationKind,
        actor_id: UserId,
        post_id: PostId,
        comment_id: Optional[CommentId],
        since: datetime,
    ) -> bool:
        """Check for a matching notification created after ``since``."""
        t = notifications_table
        stmt = (
            select(func.count())
            .select_from(t)
            .where(
                t.c.recipient_id == recipient_id,
                t.c.kind == kind.value,
                t.c.actor_id == actor_id,
                t.c.post_id == post_id,
                t.c.created_at >= since,
            )
        )
        if comment_id is None:
            stmt = stmt.where(t.c.comment_id.is_(None))
        else:
            stmt = stmt.where(t.c.comment_id == comment_id)

        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification inside a savepoint.

        A failed insert rolls back to the savepoint only, so the vote or
        comment that triggered it still commits.
        """
        with logfire.span(
            "notification_repository.save",
            notification_id=str(notification.id),
            kind=notification.kind.value,
        ):
            async with self.session.begin_nested():
                stmt = notifications_table.insert().values(
                    **notification_to_dict(notification)
                )
                await self.session.execute(stmt)
            return notification

    def _recipient_query(self, recipient_id: UserId, kind: Optional[NotificationKind]):
        stmt = select(notifications_table).where(
            notifications_table.c.recipient_id == recipient_id
        )
        if kind is not None:
            stmt = stmt.where(notifications_table.c.kind == kind.value)
        return stmt

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        kind: Optional[NotificationKind] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a user's notifications, newest first."""
        stmt = (
            self._recipient_query(recipient_id, kind)
            .order_by(desc(notifications_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count_by_recipient(
        self, recipient_id: UserId, kind: Optional[NotificationKind] = None
    ) -> int:
        """Count a user's notifications, optionally of one kind."""
        stmt = select(func.count()).select_from(
            self._recipient_query(recipient_id, kind).subquery()
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a user's unread notifications."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(
                notifications_table.c.recipient_id == recipient_id,
                notifications_table.c.is_read.is_(False),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Mark one of the recipient's notifications as read."""
        stmt = (
            update(notifications_table)
            .where(
                notifications_table.c.id == notification_id,
                notifications_table.c.recipient_id == recipient_id,
            )
            .values(is_read=True)
            .returning(notifications_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_notification(row._asdict()) if row else None

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark all of a user's notifications as read."""
        stmt = (
            update(notifications_table)
            .where(
                notifications_table.c.recipient_id == recipient_id,
                notifications_table.c.is_read.is_(False),
            )
            .values(is_read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> bool:
        """Delete one of the recipient's notifications."""
        stmt = delete(notifications_table).where(
            notifications_table.c.id == notification_id,
            notifications_table.c.recipient_id == recipient_id,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def delete_all(self, recipient_id: UserId) -> int:
        """Delete all of a user's notifications."""
        stmt = delete(notifications_table).where(
            notifications_table.c.recipient_id == recipient_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
