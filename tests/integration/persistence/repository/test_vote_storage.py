"""Integration tests for the PostgreSQL vote storage.

Require a migrated database at ``DATABASE__URL``.
"""

import os
from uuid import uuid4

import pytest
from sqlalchemy import text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.repository import (
    CommunityRepository,
    PostRepository,
    TransactionScope,
    UserRepository,
)
from agora.domain.service import VoteService, apply_vote
from agora.domain.value import CommunityName, UserId, VotableType, VoteDirection
from tests.conftest import make_community, make_post, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"), reason="needs a PostgreSQL database"
)

integration_env = create_env_fixture(unmock={"persistence"})


async def seed(env):
    user_repo = await env.get(UserRepository)
    post_repo = await env.get(PostRepository)
    community_repo = await env.get(CommunityRepository)
    author = await user_repo.save(make_user(f"author-{uuid4().hex[:8]}"))
    voter = await user_repo.save(make_user(f"voter-{uuid4().hex[:8]}"))
    community = await community_repo.save(
        make_community(author, f"c_{uuid4().hex[:12]}")
    )
    post = await post_repo.save(make_post(author, community=community.name.root))
    return author, voter, post


class TestPostgresVoteStorage:
    """Vote sets, score and karma round trip through PostgreSQL."""

    @pytest.mark.asyncio
    async def test_vote_state_round_trip(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        _, voter, post = await seed(integration_env)
        voted = apply_vote(post, voter.id, VoteDirection.UP).content

        assert await post_repo.compare_and_set_votes(voted, expected_version=0)

        stored = await post_repo.find_by_id(post.id)
        assert stored.upvoters == frozenset({voter.id})
        assert stored.score == 1
        assert stored.version == 1

    @pytest.mark.asyncio
    async def test_stale_version_is_rejected(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        _, voter, post = await seed(integration_env)
        first = apply_vote(post, voter.id, VoteDirection.UP).content
        second = apply_vote(post, UserId(uuid4()), VoteDirection.DOWN).content

        assert await post_repo.compare_and_set_votes(first, expected_version=0)
        assert not await post_repo.compare_and_set_votes(second, expected_version=0)

    @pytest.mark.asyncio
    async def test_karma_goes_negative(self, integration_env):
        vote_service = await integration_env.get(VoteService)
        user_repo = await integration_env.get(UserRepository)
        author, voter, post = await seed(integration_env)

        await vote_service.cast_vote(
            VotableType.POST, post.id, voter.id, VoteDirection.DOWN
        )

        assert (await user_repo.find_by_id(author.id)).karma == -1

    @pytest.mark.asyncio
    async def test_failed_statement_in_savepoint_keeps_transaction_usable(
        self, integration_env
    ):
        session = await integration_env.get(AsyncSession)
        scope = await integration_env.get(TransactionScope)
        post_repo = await integration_env.get(PostRepository)
        _, voter, post = await seed(integration_env)
        voted = apply_vote(post, voter.id, VoteDirection.UP).content
        assert await post_repo.compare_and_set_votes(voted, expected_version=0)

        with pytest.raises(DBAPIError):
            async with scope.savepoint():
                await session.execute(text("SELECT 1 / 0"))

        stored = await post_repo.find_by_id(post.id)
        assert stored.score == 1

    @pytest.mark.asyncio
    async def test_overlapping_vote_sets_are_rejected(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        scope = await integration_env.get(TransactionScope)
        _, voter, post = await seed(integration_env)
        both = post.model_copy(
            update={
                "upvoters": frozenset({voter.id}),
                "downvoters": frozenset({voter.id}),
                "score": 0,
            }
        )

        with pytest.raises(DBAPIError):
            async with scope.savepoint():
                await post_repo.compare_and_set_votes(both, expected_version=0)


class TestPostgresCommunities:
    """Memberships and member counts move together."""

    @pytest.mark.asyncio
    async def test_join_and_leave(self, integration_env):
        community_repo = await integration_env.get(CommunityRepository)
        _, voter, post = await seed(integration_env)
        community = await community_repo.find_by_name(CommunityName(post.community))

        assert community.member_count == 1
        assert await community_repo.add_member(community.id, voter.id)
        assert not await community_repo.add_member(community.id, voter.id)
        assert (await community_repo.find_by_name(community.name)).member_count == 2
        assert await community_repo.remove_member(community.id, voter.id)
        assert not await community_repo.remove_member(community.id, voter.id)
        assert (await community_repo.find_by_name(community.name)).member_count == 1
