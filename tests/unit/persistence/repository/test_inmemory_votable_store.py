"""Unit tests for the in-memory compare-and-set store."""

from uuid import uuid4

import pytest

from agora.domain.service import apply_vote
from agora.domain.value import UserId, VoteDirection
from agora.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
)
from tests.conftest import make_comment, make_post, make_user


class TestCompareAndSetVotes:
    """Version-guarded vote writes."""

    @pytest.mark.asyncio
    async def test_write_with_current_version_succeeds(self):
        repo = InMemoryPostRepository()
        post = await repo.save(make_post(make_user()))
        voted = apply_vote(post, UserId(uuid4()), VoteDirection.UP).content

        assert await repo.compare_and_set_votes(voted, expected_version=0) is True

        stored = await repo.find_by_id(post.id)
        assert stored.score == 1
        assert stored.version == 1

    @pytest.mark.asyncio
    async def test_stale_write_is_rejected(self):
        repo = InMemoryPostRepository()
        post = await repo.save(make_post(make_user()))
        first = apply_vote(post, UserId(uuid4()), VoteDirection.UP).content
        second = apply_vote(post, UserId(uuid4()), VoteDirection.DOWN).content

        assert await repo.compare_and_set_votes(first, expected_version=0) is True
        assert await repo.compare_and_set_votes(second, expected_version=0) is False

        stored = await repo.find_by_id(post.id)
        assert stored.upvoters == first.upvoters
        assert stored.downvoters == frozenset()

    @pytest.mark.asyncio
    async def test_missing_item_is_rejected(self):
        repo = InMemoryPostRepository()
        post = make_post(make_user())

        assert await repo.compare_and_set_votes(post, expected_version=0) is False

    @pytest.mark.asyncio
    async def test_other_fields_are_preserved(self):
        """A comment-count bump between read and write survives the vote."""
        repo = InMemoryPostRepository()
        post = await repo.save(make_post(make_user()))
        voted = apply_vote(post, UserId(uuid4()), VoteDirection.UP).content

        await repo.increment_comment_count(post.id)
        assert await repo.compare_and_set_votes(voted, expected_version=0) is True

        stored = await repo.find_by_id(post.id)
        assert stored.comment_count == 1
        assert stored.score == 1

    @pytest.mark.asyncio
    async def test_comments_share_the_contract(self):
        repo = InMemoryCommentRepository()
        author = make_user()
        comment = await repo.save(make_comment(author, make_post(author)))
        voted = apply_vote(comment, UserId(uuid4()), VoteDirection.DOWN).content

        assert await repo.compare_and_set_votes(voted, expected_version=0) is True
        assert (await repo.find_by_id(comment.id)).score == -1
