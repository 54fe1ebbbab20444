"""List notifications use case."""

import math
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from agora.domain.model import Notification
from agora.domain.service import NotificationService
from agora.domain.value import Handle, NotificationKind, UserId


class NotificationItem(BaseModel):
    """Notification in an inbox listing."""

    notification_id: str
    kind: NotificationKind
    actor_id: str
    actor_handle: Handle
    post_id: str
    comment_id: str | None
    post_title: str | None
    comment_excerpt: str | None
    message: str
    is_read: bool
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationItem":
        return cls(
            notification_id=str(notification.id),
            kind=notification.kind,
            actor_id=str(notification.actor_id),
            actor_handle=notification.actor_handle,
            post_id=str(notification.post_id),
            comment_id=str(notification.comment_id) if notification.comment_id else None,
            post_title=notification.post_title,
            comment_excerpt=notification.comment_excerpt,
            message=notification.message,
            is_read=notification.is_read,
            created_at=notification.created_at,
        )


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str  # Recipient, from authenticated user
    kind: NotificationKind | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1, le=100)


class ListNotificationsResponse(BaseModel):
    """List notifications response."""

    notifications: list[NotificationItem]
    total: int
    page: int
    limit: int
    total_pages: int
    unread_count: int


class ListNotificationsUseCase:
    """Use case for reading a user's notification inbox, newest first."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow.

        Args:
            request: Recipient, optional kind filter and page

        Returns:
            One page of notifications plus paging and unread counters
        """
        recipient_id = UserId(UUID(request.user_id))

        notifications, total = await self.notification_service.list_for_recipient(
            recipient_id,
            kind=request.kind,
            limit=request.limit,
            offset=(request.page - 1) * request.limit,
        )
        unread_count = await self.notification_service.count_unread(recipient_id)

        return ListNotificationsResponse(
            notifications=[NotificationItem.from_notification(n) for n in notifications],
            total=total,
            page=request.page,
            limit=request.limit,
            total_pages=math.ceil(total / request.limit),
            unread_count=unread_count,
        )
