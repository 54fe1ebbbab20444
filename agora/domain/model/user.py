"""User aggregate root.

Users accumulate karma when others vote on their posts and comments.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from agora.domain.model.common import DomainModel, utcnow
from agora.domain.value import Handle, UserId


class User(DomainModel):
    """User aggregate root.

    Karma is the sum of vote contributions on the user's content and can be
    negative.
    """

    id: UserId
    handle: Handle
    avatar_url: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    karma: int = 0
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
