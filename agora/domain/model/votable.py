"""Votable capability shared by posts and comments.

Both content types carry the same vote state: the set of users currently
upvoting, the set currently downvoting, the cached score derived from the
two sets, and a version number bumped on every vote write.
"""

from typing import ClassVar, Self
from uuid import UUID

from pydantic import Field, model_validator

from agora.domain.model.common import DomainModel
from agora.domain.value import UserId, VotableType, VoteDirection


class Votable(DomainModel):
    """Content that users can vote on.

    Invariants:
    - No user is in both ``upvoters`` and ``downvoters``
    - ``score == len(upvoters) - len(downvoters)``
    """

    votable_type: ClassVar[VotableType]

    id: UUID
    author_id: UserId
    upvoters: frozenset[UserId] = Field(default_factory=frozenset)
    downvoters: frozenset[UserId] = Field(default_factory=frozenset)
    score: int = 0
    version: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def validate_vote_state(self) -> Self:
        """Reject vote state that breaks the set or score invariants."""
        if self.upvoters & self.downvoters:
            raise ValueError("A user cannot both upvote and downvote the same item")
        if self.score != len(self.upvoters) - len(self.downvoters):
            raise ValueError("Score does not match the vote sets")
        return self

    def vote_of(self, user_id: UserId | None) -> VoteDirection | None:
        """Current vote held by a user, derived from set membership."""
        if user_id is None:
            return None
        if user_id in self.upvoters:
            return VoteDirection.UP
        if user_id in self.downvoters:
            return VoteDirection.DOWN
        return None

    def with_votes(
        self, upvoters: frozenset[UserId], downvoters: frozenset[UserId]
    ) -> Self:
        """Copy with new vote sets, recomputed score and the next version."""
        return self.model_copy(
            update={
                "upvoters": upvoters,
                "downvoters": downvoters,
                "score": len(upvoters) - len(downvoters),
                "version": self.version + 1,
            }
        )
