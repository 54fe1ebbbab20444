"""Reputation (karma) domain service."""

import sys

import logfire

from agora.domain.repository import UserRepository
from agora.domain.value import UserId

from .base import Service


class ReputationService(Service):
    """Applies vote deltas to authors' karma.

    Karma is updated after the vote itself has been written and is allowed
    to lag behind or miss an update; it never fails the vote.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize reputation service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def adjust_reputation(self, author_id: UserId, delta: int) -> bool:
        """Add a signed karma delta to an author.

        Args:
            author_id: Author of the voted-on item
            delta: Karma change computed by the vote transition

        Returns:
            True if karma was updated, False if skipped or failed
        """
        if delta == 0:
            return False

        with logfire.span(
            "reputation_service.adjust_reputation",
            author_id=str(author_id),
            delta=delta,
        ):
            try:
                updated = await self.user_repository.adjust_karma(author_id, delta)
            except Exception as e:
                logfire.error(
                    "Karma update failed",
                    author_id=str(author_id),
                    delta=delta,
                    error=str(e),
                    _exc_info=sys.exc_info(),
                )
                return False

            if updated:
                logfire.info("Karma adjusted", author_id=str(author_id), delta=delta)
            else:
                logfire.warn(
                    "Karma not adjusted, author not found",
                    author_id=str(author_id),
                    delta=delta,
                )
            return updated
