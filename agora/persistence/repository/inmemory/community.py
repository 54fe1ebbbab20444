"""In-memory community repository for testing."""

from typing import Optional

from agora.domain.error import CommunityNameTakenError
from agora.domain.model.community import Community
from agora.domain.repository.community import CommunityRepository
from agora.domain.value import CommunityId, CommunityName, CommunitySort, UserId


class InMemoryCommunityRepository(CommunityRepository):
    """In-memory implementation of CommunityRepository for testing."""

    def __init__(self) -> None:
        self._communities: dict[CommunityId, Community] = {}
        self._members: dict[CommunityId, set[UserId]] = {}

    async def find_by_name(self, name: CommunityName) -> Optional[Community]:
        """Find a community by its unique name."""
        for community in self._communities.values():
            if community.name == name:
                return community
        return None

    async def find_all(
        self,
        sort: CommunitySort = CommunitySort.NEW,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Community]:
        """Find communities with pagination."""
        communities = sorted(
            self._communities.values(), key=lambda c: c.created_at, reverse=True
        )
        if sort == CommunitySort.POPULAR:
            # Stable sort keeps newest first among equal member counts
            communities.sort(key=lambda c: c.member_count, reverse=True)
        return communities[offset : offset + limit]

    async def count(self) -> int:
        """Count all communities."""
        return len(self._communities)

    async def save(self, community: Community) -> Community:
        """Insert a community with its creator as the only member."""
        if await self.find_by_name(community.name):
            raise CommunityNameTakenError(community.name.root)
        saved = community.model_copy(update={"member_count": 1})
        self._communities[saved.id] = saved
        self._members[saved.id] = {saved.created_by}
        return saved

    async def is_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Check whether the user is a member of the community."""
        return user_id in self._members.get(community_id, set())

    async def add_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Add a member and bump the member count."""
        members = self._members.setdefault(community_id, set())
        if community_id not in self._communities or user_id in members:
            return False
        members.add(user_id)
        self._recount(community_id)
        return True

    async def remove_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Remove a member and lower the member count."""
        members = self._members.get(community_id, set())
        if user_id not in members:
            return False
        members.discard(user_id)
        self._recount(community_id)
        return True

    def _recount(self, community_id: CommunityId) -> None:
        community = self._communities[community_id]
        self._communities[community_id] = community.model_copy(
            update={"member_count": len(self._members[community_id])}
        )
