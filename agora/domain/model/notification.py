"""Notification entity.

Notifications tell a user that someone voted on or replied to their content.
They carry a denormalized snapshot of the actor and content so that
rendering an inbox never needs to look anything else up.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel, utcnow
from agora.domain.value import (
    CommentId,
    Handle,
    NotificationId,
    NotificationKind,
    PostId,
    UserId,
)


class Notification(DomainModel):
    """Notification entity.

    Business rules:
    - Never addressed to the user who caused it
    - At most one per (recipient, kind, actor, post, comment) within the
      de-duplication window (best effort, checked before insert)
    """

    id: NotificationId
    recipient_id: UserId
    kind: NotificationKind
    actor_id: UserId
    actor_handle: Handle
    post_id: PostId
    comment_id: Optional[CommentId] = None
    post_title: Optional[str] = None
    comment_excerpt: Optional[str] = Field(default=None, max_length=200)
    message: str
    is_read: bool = False
    created_at: datetime = Field(default_factory=utcnow)


def render_message(
    kind: NotificationKind, actor_handle: Handle, on_comment: bool
) -> str:
    """Human readable notification text.

    Args:
        kind: Notification kind
        actor_handle: Handle of the user who caused the notification
        on_comment: Whether the voted-on item is a comment

    Returns:
        Message such as "alice upvoted your comment"
    """
    target = "comment" if on_comment else "post"
    if kind is NotificationKind.UPVOTE:
        return f"{actor_handle} upvoted your {target}"
    if kind is NotificationKind.DOWNVOTE:
        return f"{actor_handle} downvoted your {target}"
    if kind is NotificationKind.POST_REPLY:
        return f"{actor_handle} commented on your post"
    return f"{actor_handle} replied to your comment"
