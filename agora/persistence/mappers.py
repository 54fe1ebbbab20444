"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable, Optional
from uuid import UUID

from agora.domain.model import Comment, Community, Notification, Post, User
from agora.domain.value import (
    CommentId,
    CommunityId,
    CommunityName,
    Handle,
    NotificationId,
    NotificationKind,
    PostId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    """Coerce a driver value (UUID or str) to UUID."""
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value else None


def _user_ids(values: Optional[Iterable[Any]]) -> frozenset[UserId]:
    """Convert a UUID[] column to a set of user IDs."""
    return frozenset(UserId(_uuid(v)) for v in values or ())


def _vote_state(row: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "upvoters": _user_ids(row.get("upvoters")),
        "downvoters": _user_ids(row.get("downvoters")),
        "score": row["score"],
        "version": row["version"],
    }


def vote_state_to_dict(content: Post | Comment) -> Dict[str, Any]:
    """Columns written by a vote compare-and-set.

    Sets are stored as sorted arrays so that equal sets produce equal rows.
    """
    return {
        "upvoters": sorted(content.upvoters),
        "downvoters": sorted(content.downvoters),
        "score": content.score,
        "version": content.version,
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        handle=Handle(row["handle"]),
        avatar_url=row.get("avatar_url"),
        email=row.get("email"),
        bio=row.get("bio"),
        karma=row["karma"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        text=row["text"],
        url=row.get("url"),
        community=row["community"],
        author_id=UserId(_uuid(row["author_id"])),
        author_handle=Handle(row["author_handle"]),
        comment_count=row["comment_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        **_vote_state(row),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        **post.model_dump(exclude={"upvoters", "downvoters"}),
        **vote_state_to_dict(post),
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_handle=Handle(row["author_handle"]),
        text=row["text"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        depth=row["depth"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        **_vote_state(row),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        **comment.model_dump(exclude={"upvoters", "downvoters"}),
        **vote_state_to_dict(comment),
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model.

    Args:
        row: Database row as dict

    Returns:
        Notification domain model
    """
    comment_id = _optional_uuid(row.get("comment_id"))
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        recipient_id=UserId(_uuid(row["recipient_id"])),
        kind=NotificationKind(row["kind"]),
        actor_id=UserId(_uuid(row["actor_id"])),
        actor_handle=Handle(row["actor_handle"]),
        post_id=PostId(_uuid(row["post_id"])),
        comment_id=CommentId(comment_id) if comment_id else None,
        post_title=row.get("post_title"),
        comment_excerpt=row.get("comment_excerpt"),
        message=row["message"],
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict.

    Args:
        notification: Notification domain model

    Returns:
        Dict suitable for database insertion
    """
    data = notification.model_dump()
    data["kind"] = notification.kind.value
    return data


def row_to_community(row: Dict[str, Any]) -> Community:
    """Convert database row to Community domain model."""
    return Community(
        id=CommunityId(_uuid(row["id"])),
        name=CommunityName(row["name"]),
        display_name=row["display_name"],
        description=row["description"],
        created_by=UserId(_uuid(row["created_by"])),
        member_count=row["member_count"],
        is_public=row["is_public"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def community_to_dict(community: Community) -> Dict[str, Any]:
    """Convert Community domain model to database dict."""
    return community.model_dump()
