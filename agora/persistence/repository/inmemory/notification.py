"""In-memory notification repository for testing."""

from datetime import datetime
from typing import Optional

from agora.domain.model.notification import Notification
from agora.domain.repository.notification import NotificationRepository
from agora.domain.value import (
    CommentId,
    NotificationId,
    NotificationKind,
    PostId,
    UserId,
)


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

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
        return any(
            n.recipient_id == recipient_id
            and n.kind == kind
            and n.actor_id == actor_id
            and n.post_id == post_id
            and n.comment_id == comment_id
            and n.created_at >= since
            for n in self._notifications.values()
        )

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        self._notifications[notification.id] = notification
        return notification

    def _for_recipient(
        self, recipient_id: UserId, kind: Optional[NotificationKind] = None
    ) -> list[Notification]:
        return [
            n
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and (kind is None or n.kind == kind)
        ]

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        kind: Optional[NotificationKind] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Notification]:
        """Find a user's notifications, newest first."""
        notifications = self._for_recipient(recipient_id, kind)
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]

    async def count_by_recipient(
        self, recipient_id: UserId, kind: Optional[NotificationKind] = None
    ) -> int:
        """Count a user's notifications."""
        return len(self._for_recipient(recipient_id, kind))

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a user's unread notifications."""
        return sum(1 for n in self._for_recipient(recipient_id) if not n.is_read)

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Optional[Notification]:
        """Mark one of the recipient's notifications as read."""
        notification = self._notifications.get(notification_id)
        if notification is None or notification.recipient_id != recipient_id:
            return None
        updated = notification.model_copy(update={"is_read": True})
        self._notifications[notification_id] = updated
        return updated

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark all of a user's notifications as read."""
        unread = [n for n in self._for_recipient(recipient_id) if not n.is_read]
        for n in unread:
            self._notifications[n.id] = n.model_copy(update={"is_read": True})
        return len(unread)

    async def delete(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> bool:
        """Delete one of the recipient's notifications."""
        notification = self._notifications.get(notification_id)
        if notification is None or notification.recipient_id != recipient_id:
            return False
        del self._notifications[notification_id]
        return True

    async def delete_all(self, recipient_id: UserId) -> int:
        """Delete all of a user's notifications."""
        ids = [n.id for n in self._for_recipient(recipient_id)]
        for notification_id in ids:
            del self._notifications[notification_id]
        return len(ids)
