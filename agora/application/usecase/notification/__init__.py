"""Notification use cases."""

from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    NotificationItem,
)
from .manage_notifications import (
    ClearNotificationsUseCase,
    CountResponse,
    DeleteNotificationUseCase,
    GetUnreadCountUseCase,
    InboxRequest,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
    NotificationRequest,
)

__all__ = [
    "ClearNotificationsUseCase",
    "CountResponse",
    "DeleteNotificationUseCase",
    "GetUnreadCountUseCase",
    "InboxRequest",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkAllNotificationsReadUseCase",
    "MarkNotificationReadUseCase",
    "NotificationItem",
    "NotificationRequest",
]
