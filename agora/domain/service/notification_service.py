"""Notification domain service."""

import sys
from datetime import timedelta
from uuid import uuid4

import logfire

from agora.config import VotingSettings
from agora.domain.error import NotFoundError
from agora.domain.model import Comment, Notification, Post, Votable
from agora.domain.model.common import utcnow
from agora.domain.model.notification import render_message
from agora.domain.repository import (
    NotificationRepository,
    PostRepository,
    TransactionScope,
    UserRepository,
)
from agora.domain.value import (
    CommentId,
    NotificationId,
    NotificationKind,
    PostId,
    UserId,
    VoteDirection,
)

from .base import Service


class NotificationService(Service):
    """Domain service for emitting and managing notifications.

    Emission is best effort: a failure is logged and swallowed so that the
    vote or comment that triggered it still succeeds.
    """

    def __init__(
        self,
        notification_repository: NotificationRepository,
        user_repository: UserRepository,
        post_repository: PostRepository,
        transaction_scope: TransactionScope,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            user_repository: User repository (actor handles)
            post_repository: Post repository (post titles for comment events)
            transaction_scope: Savepoints that keep emission failures out of
                the triggering transaction
            voting_settings: De-duplication window and excerpt length
        """
        self.notification_repository = notification_repository
        self.user_repository = user_repository
        self.post_repository = post_repository
        self.transaction_scope = transaction_scope
        self.voting_settings = voting_settings

    async def notify_if_new(
        self,
        recipient_id: UserId,
        kind: NotificationKind,
        actor_id: UserId,
        post_id: PostId,
        comment_id: CommentId | None = None,
        post_title: str | None = None,
        comment_text: str | None = None,
    ) -> Notification | None:
        """Create a notification unless it would be a duplicate.

        Skipped when the recipient is the actor, or when the same
        (recipient, kind, actor, post, comment) was notified within the
        de-duplication window. The check is read-then-write, so two racing
        requests can occasionally both insert.

        Args:
            recipient_id: User to notify
            kind: Notification kind
            actor_id: User who caused it
            post_id: Post the event happened on
            comment_id: Comment the event is about, if any
            post_title: Post title to store on the notification
            comment_text: Comment text; stored as a truncated excerpt

        Returns:
            The created notification, or None if skipped or failed
        """
        if recipient_id == actor_id:
            return None

        with logfire.span(
            "notification_service.notify_if_new",
            recipient_id=str(recipient_id),
            kind=kind.value,
            actor_id=str(actor_id),
            post_id=str(post_id),
            comment_id=str(comment_id) if comment_id else None,
        ):
            try:
                async with self.transaction_scope.savepoint():
                    saved = await self._create_unless_recent(
                        recipient_id=recipient_id,
                        kind=kind,
                        actor_id=actor_id,
                        post_id=post_id,
                        comment_id=comment_id,
                        post_title=post_title,
                        comment_text=comment_text,
                    )
            except Exception as e:
                logfire.error(
                    "Notification not created",
                    kind=kind.value,
                    recipient_id=str(recipient_id),
                    error=str(e),
                    _exc_info=sys.exc_info(),
                )
                return None

            if saved is None:
                logfire.info("Duplicate notification suppressed", kind=kind.value)
                return None

            logfire.info(
                "Notification created",
                notification_id=str(saved.id),
                kind=kind.value,
                recipient_id=str(recipient_id),
            )
            return saved

    async def _create_unless_recent(
        self,
        recipient_id: UserId,
        kind: NotificationKind,
        actor_id: UserId,
        post_id: PostId,
        comment_id: CommentId | None,
        post_title: str | None,
        comment_text: str | None,
    ) -> Notification | None:
        window = timedelta(hours=self.voting_settings.notification_window_hours)
        if await self.notification_repository.exists_recent(
            recipient_id=recipient_id,
            kind=kind,
            actor_id=actor_id,
            post_id=post_id,
            comment_id=comment_id,
            since=utcnow() - window,
        ):
            return None

        actor = await self.user_repository.find_by_id(actor_id)
        if not actor:
            raise NotFoundError("User", str(actor_id))

        excerpt = (
            comment_text[: self.voting_settings.excerpt_length] if comment_text else None
        )
        notification = Notification(
            id=NotificationId(uuid4()),
            recipient_id=recipient_id,
            kind=kind,
            actor_id=actor_id,
            actor_handle=actor.handle,
            post_id=post_id,
            comment_id=comment_id,
            post_title=post_title,
            comment_excerpt=excerpt,
            message=render_message(kind, actor.handle, on_comment=comment_id is not None),
            created_at=utcnow(),
        )
        return await self.notification_repository.save(notification)

    async def notify_vote(
        self, content: Votable, actor_id: UserId, direction: VoteDirection
    ) -> Notification | None:
        """Notify an item's author that someone voted on it.

        Args:
            content: The voted-on post or comment, as committed
            actor_id: Voter
            direction: Vote the voter now holds

        Returns:
            The created notification, or None if skipped or failed
        """
        kind = NotificationKind.for_vote(direction)

        if isinstance(content, Post):
            return await self.notify_if_new(
                recipient_id=content.author_id,
                kind=kind,
                actor_id=actor_id,
                post_id=content.id,
                post_title=content.title,
            )

        if isinstance(content, Comment):
            post_title = None
            try:
                async with self.transaction_scope.savepoint():
                    post = await self.post_repository.find_by_id(content.post_id)
                post_title = post.title if post else None
            except Exception as e:
                logfire.warn(
                    "Post title unavailable for notification",
                    post_id=str(content.post_id),
                    error=str(e),
                )
            return await self.notify_if_new(
                recipient_id=content.author_id,
                kind=kind,
                actor_id=actor_id,
                post_id=content.post_id,
                comment_id=content.id,
                post_title=post_title,
                comment_text=content.text,
            )

        raise TypeError(f"Unsupported votable type: {type(content).__name__}")

    async def notify_reply(
        self, comment: Comment, post: Post, parent: Comment | None = None
    ) -> Notification | None:
        """Notify the author of the post or parent comment about a new reply.

        Args:
            comment: The new comment
            post: Post it was made on
            parent: Parent comment for replies, None for top-level comments

        Returns:
            The created notification, or None if skipped or failed
        """
        if parent is not None:
            recipient_id = parent.author_id
            kind = NotificationKind.COMMENT_REPLY
        else:
            recipient_id = post.author_id
            kind = NotificationKind.POST_REPLY

        return await self.notify_if_new(
            recipient_id=recipient_id,
            kind=kind,
            actor_id=comment.author_id,
            post_id=post.id,
            comment_id=comment.id,
            post_title=post.title,
            comment_text=comment.text,
        )

    async def list_for_recipient(
        self,
        recipient_id: UserId,
        kind: NotificationKind | None = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Notification], int]:
        """List a user's notifications, newest first.

        Returns:
            Tuple of (page of notifications, total matching)
        """
        with logfire.span(
            "notification_service.list_for_recipient",
            recipient_id=str(recipient_id),
            kind=kind.value if kind else None,
        ):
            notifications = await self.notification_repository.find_by_recipient(
                recipient_id, kind=kind, limit=limit, offset=offset
            )
            total = await self.notification_repository.count_by_recipient(
                recipient_id, kind=kind
            )
            return notifications, total

    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a user's unread notifications."""
        return await self.notification_repository.count_unread(recipient_id)

    async def mark_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> Notification:
        """Mark one notification as read.

        Raises:
            NotFoundError: If the notification doesn't exist or isn't the user's
        """
        with logfire.span(
            "notification_service.mark_read",
            notification_id=str(notification_id),
            recipient_id=str(recipient_id),
        ):
            updated = await self.notification_repository.mark_read(
                notification_id, recipient_id
            )
            if not updated:
                logfire.warn("Notification not found", notification_id=str(notification_id))
                raise NotFoundError("Notification", str(notification_id))
            return updated

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Mark all of a user's notifications as read."""
        with logfire.span(
            "notification_service.mark_all_read", recipient_id=str(recipient_id)
        ):
            count = await self.notification_repository.mark_all_read(recipient_id)
            logfire.info("Notifications marked read", count=count)
            return count

    async def delete(self, notification_id: NotificationId, recipient_id: UserId) -> None:
        """Delete one notification.

        Raises:
            NotFoundError: If the notification doesn't exist or isn't the user's
        """
        with logfire.span(
            "notification_service.delete",
            notification_id=str(notification_id),
            recipient_id=str(recipient_id),
        ):
            deleted = await self.notification_repository.delete(
                notification_id, recipient_id
            )
            if not deleted:
                logfire.warn("Notification not found", notification_id=str(notification_id))
                raise NotFoundError("Notification", str(notification_id))

    async def clear(self, recipient_id: UserId) -> int:
        """Delete all of a user's notifications."""
        with logfire.span("notification_service.clear", recipient_id=str(recipient_id)):
            count = await self.notification_repository.delete_all(recipient_id)
            logfire.info("Notifications cleared", count=count)
            return count
