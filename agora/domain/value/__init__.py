"""Domain value objects for Agora."""

from agora.domain.value.identifiers import (
    CommentId,
    CommunityId,
    NotificationId,
    PostId,
    UserId,
)
from agora.domain.value.types import (
    CommunityName,
    CommunitySort,
    Handle,
    NotificationKind,
    PostSort,
    VotableType,
    VoteDirection,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "NotificationId",
    "CommunityId",
    # Types
    "CommunityName",
    "CommunitySort",
    "Handle",
    "NotificationKind",
    "PostSort",
    "VotableType",
    "VoteDirection",
]
