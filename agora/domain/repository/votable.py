"""Votable repository interface."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar
from uuid import UUID

from agora.domain.model.votable import Votable

V = TypeVar("V", bound=Votable)


class VotableRepository(ABC, Generic[V]):
    """Storage contract for anything the vote ledger can write to.

    Implemented by both the post and the comment repositories so that the
    ledger handles either content type through the same two calls.
    """

    @abstractmethod
    async def find_by_id(self, content_id: UUID) -> Optional[V]:
        """Find an item by ID.

        Args:
            content_id: The item's unique identifier

        Returns:
            The item if found, None otherwise
        """
        pass

    @abstractmethod
    async def compare_and_set_votes(self, content: V, expected_version: int) -> bool:
        """Write the vote state of ``content`` if nobody wrote it first.

        The upvoters, downvoters, score and version of ``content`` are stored
        in a single atomic write, guarded by the version the caller read.

        Args:
            content: The item carrying the new vote state and version
            expected_version: Version the caller's transition was computed from

        Returns:
            True if written, False if the stored version no longer matches
            (or the item is gone)
        """
        pass
