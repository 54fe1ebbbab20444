"""Post aggregate root.

Posts are submitted to a community and collect comments and votes.
"""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from agora.domain.model.common import utcnow
from agora.domain.model.votable import Votable
from agora.domain.value import Handle, PostId, VotableType


class Post(Votable):
    """Post aggregate root.

    Represents a text post, optionally linking to an external URL.
    """

    votable_type: ClassVar[VotableType] = VotableType.POST

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    text: str = Field(min_length=1, max_length=40000)
    url: Optional[str] = None
    community: str = Field(min_length=1, max_length=50)
    author_handle: Handle
    comment_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
