"""Domain value objects for Agora.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from agora.domain.error import InvalidVoteDirectionError
from agora.domain.value.common import RootValueObject


class VoteDirection(str, Enum):
    """Polarity of a vote."""

    UP = "up"
    DOWN = "down"

    @classmethod
    def parse(cls, token: str) -> "VoteDirection":
        """Parse a direction token from the API.

        Accepts ``up``/``upvote`` and ``down``/``downvote``.

        Raises:
            InvalidVoteDirectionError: If the token is anything else
        """
        direction = _DIRECTION_TOKENS.get(token)
        if direction is None:
            raise InvalidVoteDirectionError(token)
        return direction

    @property
    def contribution(self) -> int:
        """Contribution of one vote in this direction to score and karma."""
        return 1 if self is VoteDirection.UP else -1


_DIRECTION_TOKENS = {
    "up": VoteDirection.UP,
    "upvote": VoteDirection.UP,
    "down": VoteDirection.DOWN,
    "downvote": VoteDirection.DOWN,
}


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    POST = "post"
    COMMENT = "comment"


class NotificationKind(str, Enum):
    """What a notification is about."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"
    POST_REPLY = "post_reply"
    COMMENT_REPLY = "comment_reply"

    @classmethod
    def for_vote(cls, direction: VoteDirection) -> "NotificationKind":
        """Notification kind emitted for a vote in the given direction."""
        return cls.UPVOTE if direction is VoteDirection.UP else cls.DOWNVOTE


class PostSort(str, Enum):
    """Sort order for post listings."""

    NEW = "new"  # created_at DESC
    TOP = "top"  # score DESC, then created_at DESC


class CommunitySort(str, Enum):
    """Sort order for community listings."""

    NEW = "new"  # created_at DESC
    POPULAR = "popular"  # member_count DESC, then created_at DESC


class Handle(RootValueObject[str]):
    """User handle, the public display name."""

    @field_validator("root")
    @classmethod
    def validate_handle_format(cls, v: str) -> str:
        """Validate handle is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Handle must be 1-255 characters")
        return v


_COMMUNITY_NAME = re.compile(r"^[a-z0-9_]{1,50}$")


class CommunityName(RootValueObject[str]):
    """Unique community name, as it appears in URLs."""

    @field_validator("root")
    @classmethod
    def validate_community_name(cls, v: str) -> str:
        """Validate name is 1-50 lowercase letters, numbers or underscores."""
        if not _COMMUNITY_NAME.match(v):
            raise ValueError(
                "Community name must be 1-50 lowercase letters, numbers, "
                "and underscores"
            )
        return v
