"""Notification inbox management use cases."""

from uuid import UUID

from pydantic import BaseModel

from agora.domain.service import NotificationService
from agora.domain.value import NotificationId, UserId

from .list_notifications import NotificationItem


class NotificationRequest(BaseModel):
    """Request targeting one of the user's notifications."""

    notification_id: str  # UUID string
    user_id: str  # Recipient, from authenticated user


class InboxRequest(BaseModel):
    """Request targeting the user's whole inbox."""

    user_id: str  # Recipient, from authenticated user


class CountResponse(BaseModel):
    """Number of notifications affected or matching."""

    count: int


class GetUnreadCountUseCase:
    """Use case for the unread badge."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: InboxRequest) -> CountResponse:
        count = await self.notification_service.count_unread(
            UserId(UUID(request.user_id))
        )
        return CountResponse(count=count)


class MarkNotificationReadUseCase:
    """Use case for marking one notification as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: NotificationRequest) -> NotificationItem:
        """Mark the notification read.

        Raises:
            NotFoundError: If it doesn't exist or belongs to another user
        """
        notification = await self.notification_service.mark_read(
            NotificationId(UUID(request.notification_id)),
            UserId(UUID(request.user_id)),
        )
        return NotificationItem.from_notification(notification)


class MarkAllNotificationsReadUseCase:
    """Use case for marking the whole inbox as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: InboxRequest) -> CountResponse:
        count = await self.notification_service.mark_all_read(
            UserId(UUID(request.user_id))
        )
        return CountResponse(count=count)


class DeleteNotificationUseCase:
    """Use case for deleting one notification."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: NotificationRequest) -> None:
        """Delete the notification.

        Raises:
            NotFoundError: If it doesn't exist or belongs to another user
        """
        await self.notification_service.delete(
            NotificationId(UUID(request.notification_id)),
            UserId(UUID(request.user_id)),
        )


class ClearNotificationsUseCase:
    """Use case for deleting every notification in the inbox."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: InboxRequest) -> CountResponse:
        count = await self.notification_service.clear(UserId(UUID(request.user_id)))
        return CountResponse(count=count)
