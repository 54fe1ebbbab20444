"""Unit tests for the vote toggle engine."""

import pytest

from agora.domain.error import SelfVoteError
from agora.domain.service import apply_vote, contribution
from agora.domain.value import VoteDirection
from tests.conftest import make_comment, make_post, make_user

UP = VoteDirection.UP
DOWN = VoteDirection.DOWN


@pytest.fixture
def author():
    return make_user("author")


@pytest.fixture
def voter():
    return make_user("voter")


@pytest.fixture
def post(author):
    return make_post(author)


class TestApplyVote:
    """Transitions from each prior state."""

    @pytest.mark.parametrize(
        "prior, requested, expected_current, expected_delta",
        [
            (None, UP, UP, 1),
            (None, DOWN, DOWN, -1),
            (UP, UP, None, -1),
            (UP, DOWN, DOWN, -2),
            (DOWN, DOWN, None, 1),
            (DOWN, UP, UP, 2),
        ],
    )
    def test_transition_table(
        self, post, voter, prior, requested, expected_current, expected_delta
    ):
        """Each (prior, requested) pair lands in the documented state."""
        if prior is not None:
            post = apply_vote(post, voter.id, prior).content

        transition = apply_vote(post, voter.id, requested)

        assert transition.previous is prior
        assert transition.current is expected_current
        assert transition.delta == expected_delta
        assert transition.content.vote_of(voter.id) is expected_current

    def test_upvote_adds_voter_and_bumps_version(self, post, voter):
        """A fresh upvote lands in upvoters only."""
        transition = apply_vote(post, voter.id, UP)

        assert transition.content.upvoters == frozenset({voter.id})
        assert transition.content.downvoters == frozenset()
        assert transition.content.score == 1
        assert transition.content.version == post.version + 1

    def test_switch_moves_voter_between_sets(self, post, voter):
        """Switching never leaves the voter in both sets."""
        upvoted = apply_vote(post, voter.id, UP).content

        switched = apply_vote(upvoted, voter.id, DOWN).content

        assert voter.id not in switched.upvoters
        assert voter.id in switched.downvoters
        assert switched.score == -1

    def test_toggle_twice_restores_sets(self, post, voter):
        """Voting the same way twice returns to the original sets."""
        once = apply_vote(post, voter.id, UP).content
        twice = apply_vote(once, voter.id, UP).content

        assert twice.upvoters == post.upvoters
        assert twice.downvoters == post.downvoters
        assert twice.score == post.score
        assert twice.version == post.version + 2

    def test_other_voters_are_untouched(self, post, voter):
        """Only the actor's membership changes."""
        others = [make_user(f"user{i}") for i in range(3)]
        for other in others:
            post = apply_vote(post, other.id, DOWN).content

        transition = apply_vote(post, voter.id, UP)

        assert transition.content.downvoters == frozenset(o.id for o in others)
        assert transition.content.score == 1 - 3

    def test_author_cannot_vote_on_own_post(self, post, author):
        """Self votes are rejected before any state changes."""
        with pytest.raises(SelfVoteError, match="own post"):
            apply_vote(post, author.id, UP)

    def test_author_cannot_vote_on_own_comment(self, post, author, voter):
        """Comments share the self-vote rule."""
        comment = make_comment(voter, post)

        with pytest.raises(SelfVoteError, match="own comment"):
            apply_vote(comment, voter.id, DOWN)

    def test_comment_transitions_match_posts(self, post, author, voter):
        """Comments go through the same table as posts."""
        comment = make_comment(author, post)

        first = apply_vote(comment, voter.id, DOWN)
        second = apply_vote(first.content, voter.id, UP)

        assert first.delta == -1
        assert second.delta == 2
        assert second.content.score == 1


class TestContribution:
    """Contribution of a held vote."""

    def test_values(self):
        assert contribution(UP) == 1
        assert contribution(DOWN) == -1
        assert contribution(None) == 0


class TestVoteSequenceInvariants:
    """Score and karma stay consistent over arbitrary vote sequences."""

    def test_score_and_karma_track_sets(self, post):
        voters = [make_user(f"voter{i}") for i in range(4)]
        sequence = [
            (0, UP), (1, DOWN), (0, DOWN), (2, UP), (1, DOWN),
            (3, UP), (2, UP), (0, DOWN), (3, DOWN), (1, UP),
        ]

        karma = 0
        for index, direction in sequence:
            transition = apply_vote(post, voters[index].id, direction)
            post = transition.content
            karma += transition.delta

            assert not post.upvoters & post.downvoters
            assert post.score == len(post.upvoters) - len(post.downvoters)
            assert karma == post.score
