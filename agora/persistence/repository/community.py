"""PostgreSQL implementation of Community repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.error import CommunityNameTakenError
from agora.domain.model import Community
from agora.domain.repository import CommunityRepository
from agora.domain.value import CommunityId, CommunityName, CommunitySort, UserId
from agora.persistence.mappers import community_to_dict, row_to_community
from agora.persistence.tables import communities_table, community_members_table


class PostgresCommunityRepository(CommunityRepository):
    """PostgreSQL implementation of CommunityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_name(self, name: CommunityName) -> Optional[Community]:
        """Find a community by its unique name."""
        stmt = select(communities_table).where(communities_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_community(dict(row)) if row else None

    async def find_all(
        self,
        sort: CommunitySort = CommunitySort.NEW,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Community]:
        """Find communities with pagination."""
        with logfire.span(
            "community_repository.find_all", sort=sort.value, limit=limit, offset=offset
        ):
            stmt = select(communities_table)
            if sort == CommunitySort.POPULAR:
                stmt = stmt.order_by(
                    desc(communities_table.c.member_count),
                    desc(communities_table.c.created_at),
                )
            else:
                stmt = stmt.order_by(desc(communities_table.c.created_at))

            result = await self.session.execute(stmt.limit(limit).offset(offset))
            return [row_to_community(dict(row)) for row in result.mappings().all()]

    async def count(self) -> int:
        """Count all communities."""
        stmt = select(func.count()).select_from(communities_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, community: Community) -> Community:
        """Insert a community and its creator's membership.

        Runs in a savepoint so a lost race on the name leaves the request's
        transaction usable.
        """
        with logfire.span(
            "community_repository.save",
            community_id=str(community.id),
            name=community.name.root,
        ):
            saved = community.model_copy(update={"member_count": 1})
            try:
                async with self.session.begin_nested():
                    await self.session.execute(
                        communities_table.insert().values(**community_to_dict(saved))
                    )
                    await self.session.execute(
                        community_members_table.insert().values(
                            community_id=community.id, user_id=community.created_by
                        )
                    )
            except IntegrityError as e:
                logfire.warn("Community name taken", name=community.name.root)
                raise CommunityNameTakenError(community.name.root) from e
            return saved

    async def is_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Check whether the user is a member of the community."""
        stmt = select(func.count()).select_from(community_members_table).where(
            community_members_table.c.community_id == community_id,
            community_members_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def add_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Add a member; the count only moves when a row was inserted."""
        stmt = (
            insert(community_members_table)
            .values(community_id=community_id, user_id=user_id)
            .on_conflict_do_nothing()
            .returning(community_members_table.c.user_id)
        )
        result = await self.session.execute(stmt)
        if result.fetchone() is None:
            return False

        await self.session.execute(
            communities_table.update()
            .where(communities_table.c.id == community_id)
            .values(member_count=communities_table.c.member_count + 1)
        )
        await self.session.flush()
        return True

    async def remove_member(self, community_id: CommunityId, user_id: UserId) -> bool:
        """Remove a member; the count only moves when a row was deleted."""
        stmt = community_members_table.delete().where(
            community_members_table.c.community_id == community_id,
            community_members_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            return False

        await self.session.execute(
            communities_table.update()
            .where(communities_table.c.id == community_id)
            .values(member_count=communities_table.c.member_count - 1)
        )
        await self.session.flush()
        return True
