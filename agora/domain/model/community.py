"""Community aggregate root.

Communities group posts by topic. Every post is submitted to one.
"""

from datetime import datetime

from pydantic import Field

from agora.domain.model.common import DomainModel, utcnow
from agora.domain.value import CommunityId, CommunityName, UserId


class Community(DomainModel):
    """Community aggregate root.

    The creator is its first member and cannot leave. ``member_count`` is
    maintained by the repository as members join and leave.
    """

    id: CommunityId
    name: CommunityName
    display_name: str = Field(min_length=1, max_length=100)
    description: str = Field(default="", max_length=500)
    created_by: UserId
    member_count: int = Field(default=1, ge=0)
    is_public: bool = True
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def url(self) -> str:
        """Path of the community's front page."""
        return f"/r/{self.name.root}"
