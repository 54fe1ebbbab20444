"""In-memory compare-and-set store shared by posts and comments."""

from typing import Generic, Optional, TypeVar
from uuid import UUID

from agora.domain.model import Votable

V = TypeVar("V", bound=Votable)


class InMemoryVotableStore(Generic[V]):
    """Dict-backed items with a version-guarded vote write."""

    def __init__(self) -> None:
        self._items: dict[UUID, V] = {}

    async def find_by_id(self, content_id: UUID) -> Optional[V]:
        """Find an item by ID."""
        return self._items.get(content_id)

    async def compare_and_set_votes(self, content: V, expected_version: int) -> bool:
        """Replace the vote state if the stored version still matches.

        Only the vote fields are taken from ``content``; anything else
        written since the read (e.g. comment_count) is preserved.
        """
        stored = self._items.get(content.id)
        if stored is None or stored.version != expected_version:
            return False
        self._items[content.id] = stored.model_copy(
            update={
                "upvoters": content.upvoters,
                "downvoters": content.downvoters,
                "score": content.score,
                "version": content.version,
            }
        )
        return True
