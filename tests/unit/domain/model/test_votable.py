"""Unit tests for the votable vote state."""

from uuid import uuid4

import pytest

from agora.domain.value import UserId, VoteDirection
from tests.conftest import make_post, make_user


class TestVoteState:
    """Vote state validation and derivation."""

    def test_overlapping_sets_are_rejected(self):
        """A user can't be in both sets."""
        post = make_post(make_user())
        user_id = UserId(uuid4())

        with pytest.raises(ValueError, match="both upvote and downvote"):
            type(post).model_validate(
                {
                    **post.model_dump(),
                    "upvoters": [user_id],
                    "downvoters": [user_id],
                    "score": 0,
                }
            )

    def test_score_must_match_sets(self):
        post = make_post(make_user())

        with pytest.raises(ValueError, match="Score does not match"):
            type(post).model_validate({**post.model_dump(), "score": 3})

    def test_vote_of_reads_membership(self):
        post = make_post(make_user())
        up, down, neutral = UserId(uuid4()), UserId(uuid4()), UserId(uuid4())
        voted = post.with_votes(frozenset({up}), frozenset({down}))

        assert voted.vote_of(up) is VoteDirection.UP
        assert voted.vote_of(down) is VoteDirection.DOWN
        assert voted.vote_of(neutral) is None
        assert voted.vote_of(None) is None

    def test_with_votes_recomputes_score_and_version(self):
        post = make_post(make_user())
        voters = frozenset(UserId(uuid4()) for _ in range(3))

        voted = post.with_votes(voters, frozenset())

        assert voted.score == 3
        assert voted.version == post.version + 1
