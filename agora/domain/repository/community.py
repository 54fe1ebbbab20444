"""Community repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from agora.domain.model.community import Community
from agora.domain.value import CommunityId, CommunityName, CommunitySort, UserId


class CommunityRepository(ABC):
    """Repository for Community aggregate and its memberships."""

    @abstractmethod
    async def find_by_name(self, name: CommunityName) -> Optional[Community]:
        """Find a community by its unique name.

        Returns:
            Community if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: CommunitySort = CommunitySort.NEW,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Community]:
        """Find communities with pagination.

        Args:
            sort: Sort order (new or popular)
            limit: Maximum number of communities to return
            offset: Number of communities to skip

        Returns:
            List of communities
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all communities."""
        pass

    @abstractmethod
    async def save(self, community: Community) -> Community:
        """Insert a new community with its creator as the only member.

        Raises:
            CommunityNameTakenError: If the name is already in use

        Returns:
            The saved community, with a member count of 1
        """
        pass

    @abstractmethod
    async def is_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Check whether the user is a member of the community."""
        pass

    @abstractmethod
    async def add_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Add a member and bump the member count atomically.

        Returns:
            True if added, False if the user was already a member
        """
        pass

    @abstractmethod
    async def remove_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Remove a member and lower the member count atomically.

        Returns:
            True if removed, False if the user wasn't a member
        """
        pass
