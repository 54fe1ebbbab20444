"""Vote domain service."""

from uuid import UUID

import logfire

from agora.config import VotingSettings
from agora.domain.error import ConcurrencyConflictError, NotFoundError
from agora.domain.model import Votable
from agora.domain.repository import (
    CommentRepository,
    PostRepository,
    VotableRepository,
)
from agora.domain.value import UserId, VotableType, VoteDirection

from .base import Service
from .notification_service import NotificationService
from .reputation_service import ReputationService
from .vote_ledger import VoteTransition, apply_vote


class VoteService(Service):
    """Domain service for vote operations.

    Posts and comments go through the same ledger; only the repository differs.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        reputation_service: ReputationService,
        notification_service: NotificationService,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize vote service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository
            reputation_service: Karma side effects
            notification_service: Vote notifications
            voting_settings: Retry budget for conflicting writes
        """
        self.repositories: dict[VotableType, VotableRepository] = {
            VotableType.POST: post_repository,
            VotableType.COMMENT: comment_repository,
        }
        self.reputation_service = reputation_service
        self.notification_service = notification_service
        self.voting_settings = voting_settings

    async def cast_vote(
        self,
        votable_type: VotableType,
        content_id: UUID,
        actor_id: UserId,
        direction: VoteDirection,
    ) -> VoteTransition[Votable]:
        """Cast, switch or retract a vote on a post or comment.

        Steps:
        1. Load the item and its version
        2. Compute the transition in memory
        3. Write it back only if the version is unchanged, otherwise reload
           and recompute (bounded by ``voting.max_retries``)
        4. Apply the karma delta to the author (best effort)
        5. Notify the author if the actor now holds a vote (best effort)

        Args:
            votable_type: Post or comment
            content_id: Item ID
            actor_id: Voting user
            direction: Requested direction

        Returns:
            The committed transition

        Raises:
            NotFoundError: If the item doesn't exist
            SelfVoteError: If the actor authored the item
            ConcurrencyConflictError: If every write attempt lost a race
        """
        with logfire.span(
            "vote_service.cast_vote",
            votable_type=votable_type.value,
            content_id=str(content_id),
            actor_id=str(actor_id),
            direction=direction.value,
        ):
            repository = self.repositories[votable_type]
            attempts = self.voting_settings.max_retries

            for attempt in range(1, attempts + 1):
                content = await repository.find_by_id(content_id)
                if not content:
                    logfire.warn(
                        "Vote on non-existent item",
                        votable_type=votable_type.value,
                        content_id=str(content_id),
                    )
                    raise NotFoundError(votable_type.value.capitalize(), str(content_id))

                transition = apply_vote(content, actor_id, direction)

                if await repository.compare_and_set_votes(
                    transition.content, expected_version=content.version
                ):
                    break

                logfire.info(
                    "Vote write conflict, retrying",
                    content_id=str(content_id),
                    attempt=attempt,
                )
            else:
                logfire.error(
                    "Vote write conflict, giving up",
                    content_id=str(content_id),
                    attempts=attempts,
                )
                raise ConcurrencyConflictError(
                    votable_type.value, str(content_id), attempts
                )

            logfire.info(
                "Vote recorded",
                content_id=str(content_id),
                previous=transition.previous.value if transition.previous else None,
                current=transition.current.value if transition.current else None,
                score=transition.content.score,
                delta=transition.delta,
            )

            await self.reputation_service.adjust_reputation(
                transition.content.author_id, transition.delta
            )

            if transition.current is not None:
                await self.notification_service.notify_vote(
                    transition.content, actor_id, transition.current
                )

            return transition
