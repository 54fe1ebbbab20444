"""Notification repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from agora.domain.model.notification import Notification
from agora.domain.value import (
    CommentId,
    NotificationId,
    NotificationKind,
    PostId,
    UserId,
)


class NotificationRepository(ABC):
    """Repository for Notification entity.

    Also serves as the notification sink for the vote ledger.
    """

    @abstractmethod
    async def exists_recent(
        self,
        recipient_id: UserId,
        kind: NotificationKind,
        actor_id: UserId,
        post_id: PostId,
        comment_id: Optional[CommentId],
        since: datetime,
    ) -> bool:
        """Check for a matching notification created after ``since``.

        ``comment_id`` is matched exactly, so None only matches None.

        Returns:
            True if a matching notification exists, False otherwise
        """
        pass

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert a notification.

        Args:
            notification: The notification to save

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def find_by_recipient(
        self,
        recipient_id: UserId,
        kind: Optional[NotificationKind] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """Find a user's notifications, newest first.

        Args:
            recipient_id: The recipient's user ID
            kind: Optional kind filter
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def count_by_recipient(
        self, recipient_id: UserId, kind: Optional[NotificationKind] = None
    ) -> int:
        """Count a user's notifications, optionally of one kind."""
        pass

    @abstractmethod
    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a user's unread notifications."""
        pass

    @abstractmethod
    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Mark one of the recipient's notifications as read.

        Returns:
            The updated notification, or None if it doesn't exist or belongs
            to someone else
        """
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark all of a user's notifications as read.

        Returns:
            Number of notifications updated
        """
        pass

    @abstractmethod
    async def delete(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> bool:
        """Delete one of the recipient's notifications.

        Returns:
            True if deleted, False if it doesn't exist or belongs to someone else
        """
        pass

    @abstractmethod
    async def delete_all(self, recipient_id: UserId) -> int:
        """Delete all of a user's notifications.

        Returns:
            Number of notifications deleted
        """
        pass
