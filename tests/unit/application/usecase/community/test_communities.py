"""Unit tests for the community use cases."""

from uuid import uuid4

import pytest

from agora.application.usecase.community import (
    CheckCommunityNameRequest,
    CheckCommunityNameUseCase,
    CreateCommunityRequest,
    CreateCommunityUseCase,
    GetCommunityRequest,
    GetCommunityUseCase,
    JoinCommunityUseCase,
    LeaveCommunityUseCase,
    ListCommunitiesRequest,
    ListCommunitiesUseCase,
    MembershipRequest,
)
from agora.domain.error import NotFoundError
from agora.domain.repository import UserRepository
from agora.domain.value import CommunitySort
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def found(env, name: str = "science", display_name: str | None = None):
    """Save a founder and create their community through the use case."""
    user_repo = await env.get(UserRepository)
    founder = await user_repo.save(make_user(f"founder_{name}"))
    use_case = await env.get(CreateCommunityUseCase)
    view = await use_case.execute(
        CreateCommunityRequest(
            name=name, display_name=display_name, creator_id=str(founder.id)
        )
    )
    return founder, view


class TestCreateCommunityUseCase:
    """Tests for CreateCommunityUseCase."""

    @pytest.mark.asyncio
    async def test_creator_sees_membership(self, unit_env):
        founder, view = await found(unit_env, display_name="Science!")

        assert view.name.root == "science"
        assert view.display_name == "Science!"
        assert view.created_by == str(founder.id)
        assert view.member_count == 1
        assert view.is_member is True

    @pytest.mark.asyncio
    async def test_unknown_creator(self, unit_env):
        use_case = await unit_env.get(CreateCommunityUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommunityRequest(name="science", creator_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_malformed_name(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        founder = await user_repo.save(make_user("founder"))
        use_case = await unit_env.get(CreateCommunityUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(
                CreateCommunityRequest(name="Science", creator_id=str(founder.id))
            )


class TestGetCommunityUseCase:
    """Tests for GetCommunityUseCase."""

    @pytest.mark.asyncio
    async def test_membership_follows_viewer(self, unit_env):
        founder, _ = await found(unit_env)
        use_case = await unit_env.get(GetCommunityUseCase)

        as_founder = await use_case.execute(
            GetCommunityRequest(name="science", viewer_id=str(founder.id))
        )
        as_stranger = await use_case.execute(
            GetCommunityRequest(name="science", viewer_id=str(uuid4()))
        )
        anonymous = await use_case.execute(GetCommunityRequest(name="science"))

        assert as_founder.is_member is True
        assert as_stranger.is_member is False
        assert anonymous.is_member is False
        assert anonymous.url == "/r/science"

    @pytest.mark.asyncio
    async def test_missing(self, unit_env):
        use_case = await unit_env.get(GetCommunityUseCase)

        with pytest.raises(NotFoundError, match="Community not found: nowhere"):
            await use_case.execute(GetCommunityRequest(name="nowhere"))


class TestMembershipUseCases:
    """Tests for JoinCommunityUseCase and LeaveCommunityUseCase."""

    @pytest.mark.asyncio
    async def test_join_and_leave_messages(self, unit_env):
        await found(unit_env)
        user_repo = await unit_env.get(UserRepository)
        member = await user_repo.save(make_user("member"))
        join = await unit_env.get(JoinCommunityUseCase)
        leave = await unit_env.get(LeaveCommunityUseCase)
        request = MembershipRequest(name="science", user_id=str(member.id))

        joined = await join.execute(request)
        left = await leave.execute(request)

        assert joined.message == "Successfully joined community"
        assert joined.community.member_count == 2
        assert joined.community.is_member is True
        assert left.message == "Successfully left community"
        assert left.community.member_count == 1
        assert left.community.is_member is False


class TestListAndCheckUseCases:
    """Tests for ListCommunitiesUseCase and CheckCommunityNameUseCase."""

    @pytest.mark.asyncio
    async def test_list_pages(self, unit_env):
        await found(unit_env, "science")
        await found(unit_env, "art")
        use_case = await unit_env.get(ListCommunitiesUseCase)

        page = await use_case.execute(
            ListCommunitiesRequest(sort=CommunitySort.POPULAR, limit=1)
        )

        assert page.total == 2
        assert len(page.communities) == 1
        assert page.limit == 1

    @pytest.mark.asyncio
    async def test_check_name(self, unit_env):
        await found(unit_env)
        use_case = await unit_env.get(CheckCommunityNameUseCase)

        taken = await use_case.execute(CheckCommunityNameRequest(name="science"))
        free = await use_case.execute(CheckCommunityNameRequest(name="art"))
        malformed = await use_case.execute(CheckCommunityNameRequest(name="Art!"))

        assert (taken.available, taken.message) == (
            False,
            "Community name already exists",
        )
        assert (free.available, free.message) == (True, "Name is available")
        assert malformed.available is False
        assert malformed.message.startswith("Community name must be")
