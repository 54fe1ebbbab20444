"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from agora.application.projection import summarize_votes
from agora.domain.service import VoteService
from agora.domain.value import UserId, VotableType, VoteDirection


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    direction: str  # up, upvote, down or downvote


class CastVoteResponse(BaseModel):
    """Vote state after the request, as committed."""

    votable_type: VotableType
    votable_id: str
    score: int
    upvote_count: int
    downvote_count: int
    user_vote: VoteDirection | None


class CastVoteUseCase:
    """Use case for voting on a post or comment.

    Requesting the direction already held retracts the vote; requesting the
    other direction switches it.
    """

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        The direction and IDs are validated before anything is read.

        Args:
            request: Cast vote request

        Returns:
            Counters and the actor's vote computed from the committed state

        Raises:
            InvalidVoteDirectionError: If the direction token is unknown
            ValueError: If an ID is not a valid UUID
            NotFoundError: If the item doesn't exist
            SelfVoteError: If the actor authored the item
            ConcurrencyConflictError: If the write kept conflicting
        """
        direction = VoteDirection.parse(request.direction)
        content_id = UUID(request.votable_id)
        actor_id = UserId(UUID(request.user_id))

        transition = await self.vote_service.cast_vote(
            votable_type=request.votable_type,
            content_id=content_id,
            actor_id=actor_id,
            direction=direction,
        )

        summary = summarize_votes(transition.content, actor_id)
        return CastVoteResponse(
            votable_type=request.votable_type,
            votable_id=str(content_id),
            **summary.model_dump(),
        )
