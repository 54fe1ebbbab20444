"""Unit tests for CommunityService."""

from datetime import timedelta

import pytest

from agora.domain.error import CommunityNameTakenError, MembershipError, NotFoundError
from agora.domain.model.common import utcnow
from agora.domain.repository import CommunityRepository, UserRepository
from agora.domain.service import CommunityService
from agora.domain.value import CommunityName, CommunitySort
from tests.conftest import make_community, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed(env):
    """Save a founder, another user and the founder's community."""
    user_repo = await env.get(UserRepository)
    service = await env.get(CommunityService)
    founder = await user_repo.save(make_user("founder"))
    other = await user_repo.save(make_user("other"))
    community = await service.create_community(
        creator_id=founder.id, name=CommunityName("science")
    )
    return founder, other, community


class TestCreateCommunity:
    """Founding communities."""

    @pytest.mark.asyncio
    async def test_creator_is_first_member(self, unit_env):
        service = await unit_env.get(CommunityService)
        founder, _, community = await seed(unit_env)

        assert community.member_count == 1
        assert community.display_name == "science"
        assert community.url == "/r/science"
        assert await service.is_member(community, founder.id)

    @pytest.mark.asyncio
    async def test_name_taken(self, unit_env):
        service = await unit_env.get(CommunityService)
        _, other, _ = await seed(unit_env)

        with pytest.raises(CommunityNameTakenError):
            await service.create_community(
                creator_id=other.id, name=CommunityName("science")
            )

        assert not await service.is_name_available(CommunityName("science"))
        assert await service.is_name_available(CommunityName("art"))

    def test_name_format(self):
        with pytest.raises(ValueError):
            CommunityName("Has Spaces")
        with pytest.raises(ValueError):
            CommunityName("x" * 51)
        assert CommunityName("under_score_42").root == "under_score_42"


class TestMembership:
    """Joining and leaving keep the member count in step."""

    @pytest.mark.asyncio
    async def test_join_then_leave(self, unit_env):
        service = await unit_env.get(CommunityService)
        _, other, community = await seed(unit_env)

        joined = await service.join(community.name, other.id)
        assert joined.member_count == 2
        assert await service.is_member(joined, other.id)

        left = await service.leave(community.name, other.id)
        assert left.member_count == 1
        assert not await service.is_member(left, other.id)

    @pytest.mark.asyncio
    async def test_double_join_is_rejected(self, unit_env):
        service = await unit_env.get(CommunityService)
        _, other, community = await seed(unit_env)
        await service.join(community.name, other.id)

        with pytest.raises(MembershipError, match="Already a member"):
            await service.join(community.name, other.id)

        assert (await service.get_community(community.name)).member_count == 2

    @pytest.mark.asyncio
    async def test_creator_cannot_leave(self, unit_env):
        service = await unit_env.get(CommunityService)
        founder, _, community = await seed(unit_env)

        with pytest.raises(MembershipError, match="Creator cannot leave"):
            await service.leave(community.name, founder.id)

    @pytest.mark.asyncio
    async def test_leaving_without_membership(self, unit_env):
        service = await unit_env.get(CommunityService)
        _, other, community = await seed(unit_env)

        with pytest.raises(MembershipError, match="Not a member"):
            await service.leave(community.name, other.id)

        assert (await service.get_community(community.name)).member_count == 1

    @pytest.mark.asyncio
    async def test_unknown_community(self, unit_env):
        service = await unit_env.get(CommunityService)
        _, other, _ = await seed(unit_env)

        with pytest.raises(NotFoundError):
            await service.join(CommunityName("nowhere"), other.id)


class TestListCommunities:
    """Newest and popular orderings."""

    @pytest.mark.asyncio
    async def test_popular_sorts_by_members(self, unit_env):
        service = await unit_env.get(CommunityService)
        community_repo = await unit_env.get(CommunityRepository)
        user_repo = await unit_env.get(UserRepository)
        founder = await user_repo.save(make_user("founder"))
        joiner = await user_repo.save(make_user("joiner"))
        old = make_community(founder, "old").model_copy(
            update={"created_at": utcnow() - timedelta(days=2)}
        )
        new = make_community(founder, "new")
        await community_repo.save(old)
        await community_repo.save(new)
        await community_repo.add_member(old.id, joiner.id)

        newest, total = await service.list_communities(sort=CommunitySort.NEW)
        popular, _ = await service.list_communities(sort=CommunitySort.POPULAR)

        assert total == 2
        assert [c.name.root for c in newest] == ["new", "old"]
        assert [c.name.root for c in popular] == ["old", "new"]
        assert popular[0].member_count == 2
