"""Notification inbox routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status

from agora.application.usecase.notification import (
    ClearNotificationsUseCase,
    CountResponse,
    DeleteNotificationUseCase,
    GetUnreadCountUseCase,
    InboxRequest,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
    NotificationItem,
    NotificationRequest,
)
from agora.domain.error import NotFoundError
from agora.domain.service import JWTService
from agora.domain.value import NotificationKind
from agora.interface.api.auth import require_user_id

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    kind: NotificationKind | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """List your notifications, newest first.

    Args:
        kind: Only notifications of this kind
        page: 1-based page number
        limit: Page size

    Returns:
        One page of notifications with total pages and unread count
    """
    user_id = require_user_id(jwt_service, auth_token, "read notifications")
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(user_id=user_id, kind=kind, page=page, limit=limit)
    )


@router.get("/unread-count", response_model=CountResponse)
async def unread_count(
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CountResponse:
    """Number of unread notifications."""
    user_id = require_user_id(jwt_service, auth_token, "read notifications")
    return await get_unread_count_use_case.execute(InboxRequest(user_id=user_id))


@router.post("/read-all", response_model=CountResponse)
async def mark_all_read(
    mark_all_read_use_case: FromDishka[MarkAllNotificationsReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CountResponse:
    """Mark every notification as read."""
    user_id = require_user_id(jwt_service, auth_token, "update notifications")
    return await mark_all_read_use_case.execute(InboxRequest(user_id=user_id))


@router.post("/{notification_id}/read", response_model=NotificationItem)
async def mark_read(
    notification_id: str,
    mark_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> NotificationItem:
    """Mark one notification as read.

    Raises:
        HTTPException: 404 if it doesn't exist or isn't yours
    """
    user_id = require_user_id(jwt_service, auth_token, "update notifications")
    try:
        return await mark_read_use_case.execute(
            NotificationRequest(notification_id=notification_id, user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_notification(
    notification_id: str,
    delete_notification_use_case: FromDishka[DeleteNotificationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete one notification.

    Raises:
        HTTPException: 404 if it doesn't exist or isn't yours
    """
    user_id = require_user_id(jwt_service, auth_token, "delete notifications")
    try:
        await delete_notification_use_case.execute(
            NotificationRequest(notification_id=notification_id, user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("", response_model=CountResponse)
async def clear_notifications(
    clear_notifications_use_case: FromDishka[ClearNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CountResponse:
    """Delete every notification."""
    user_id = require_user_id(jwt_service, auth_token, "delete notifications")
    return await clear_notifications_use_case.execute(InboxRequest(user_id=user_id))
