"""Comment entity.

Comments are threaded discussions on posts with unlimited depth.
"""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from agora.domain.model.common import utcnow
from agora.domain.model.votable import Votable
from agora.domain.value import CommentId, Handle, PostId, VotableType


class Comment(Votable):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, increments with each reply)
    """

    votable_type: ClassVar[VotableType] = VotableType.COMMENT

    id: CommentId
    post_id: PostId
    author_handle: Handle
    text: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
