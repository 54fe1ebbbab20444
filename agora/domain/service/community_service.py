"""Community domain service."""

from uuid import uuid4

import logfire

from agora.domain.error import CommunityNameTakenError, MembershipError, NotFoundError
from agora.domain.model import Community
from agora.domain.model.common import utcnow
from agora.domain.repository import CommunityRepository
from agora.domain.value import CommunityId, CommunityName, CommunitySort, UserId

from .base import Service


class CommunityService(Service):
    """Domain service for communities and memberships."""

    def __init__(self, community_repository: CommunityRepository) -> None:
        """Initialize community service.

        Args:
            community_repository: Community repository
        """
        self.community_repository = community_repository

    async def create_community(
        self,
        creator_id: UserId,
        name: CommunityName,
        display_name: str | None = None,
        description: str = "",
        is_public: bool = True,
    ) -> Community:
        """Create a community with its creator as the first member.

        Args:
            creator_id: User creating the community
            name: Unique community name
            display_name: Shown name, defaults to the name
            description: Free-text description
            is_public: Whether the community is listed publicly

        Returns:
            Created community

        Raises:
            CommunityNameTakenError: If the name is already in use
        """
        with logfire.span(
            "community_service.create_community",
            creator_id=str(creator_id),
            name=name.root,
        ):
            if not await self.is_name_available(name):
                logfire.warn("Community name taken", name=name.root)
                raise CommunityNameTakenError(name.root)

            now = utcnow()
            community = Community(
                id=CommunityId(uuid4()),
                name=name,
                display_name=display_name or name.root,
                description=description,
                created_by=creator_id,
                is_public=is_public,
                created_at=now,
                updated_at=now,
            )
            saved = await self.community_repository.save(community)
            logfire.info(
                "Community created", community_id=str(saved.id), name=name.root
            )
            return saved

    async def get_community(self, name: CommunityName) -> Community:
        """Get a community by name.

        Raises:
            NotFoundError: If no community has that name
        """
        with logfire.span("community_service.get_community", name=name.root):
            community = await self.community_repository.find_by_name(name)
            if not community:
                logfire.warn("Community not found", name=name.root)
                raise NotFoundError("Community", name.root)
            return community

    async def list_communities(
        self, sort: CommunitySort = CommunitySort.NEW, limit: int = 50, offset: int = 0
    ) -> tuple[list[Community], int]:
        """List communities, newest or most popular first.

        Returns:
            Tuple of (page of communities, total)
        """
        with logfire.span(
            "community_service.list_communities",
            sort=sort.value,
            limit=limit,
            offset=offset,
        ):
            communities = await self.community_repository.find_all(
                sort=sort, limit=limit, offset=offset
            )
            total = await self.community_repository.count()
            return communities, total

    async def is_name_available(self, name: CommunityName) -> bool:
        """Whether no community uses the name yet."""
        return await self.community_repository.find_by_name(name) is None

    async def is_member(self, community: Community, user_id: UserId) -> bool:
        """Whether the user is a member of the community."""
        return await self.community_repository.is_member(community.id, user_id)

    async def join(self, name: CommunityName, user_id: UserId) -> Community:
        """Add the user to the community's members.

        Returns:
            The community with its updated member count

        Raises:
            NotFoundError: If no community has that name
            MembershipError: If the user is already a member
        """
        with logfire.span(
            "community_service.join", name=name.root, user_id=str(user_id)
        ):
            community = await self.get_community(name)
            if not await self.community_repository.add_member(community.id, user_id):
                raise MembershipError("Already a member")
            logfire.info("Community joined", name=name.root, user_id=str(user_id))
            return await self.get_community(name)

    async def leave(self, name: CommunityName, user_id: UserId) -> Community:
        """Remove the user from the community's members.

        Returns:
            The community with its updated member count

        Raises:
            NotFoundError: If no community has that name
            MembershipError: If the user is the creator or not a member
        """
        with logfire.span(
            "community_service.leave", name=name.root, user_id=str(user_id)
        ):
            community = await self.get_community(name)
            if community.created_by == user_id:
                raise MembershipError("Creator cannot leave community")
            if not await self.community_repository.remove_member(
                community.id, user_id
            ):
                raise MembershipError("Not a member")
            logfire.info("Community left", name=name.root, user_id=str(user_id))
            return await self.get_community(name)
