"""Unit tests for the read projection of votable content."""

from uuid import uuid4

from agora.application.projection import project_comment, project_post, summarize_votes
from agora.domain.service import apply_vote
from agora.domain.value import UserId, VoteDirection
from tests.conftest import make_comment, make_post, make_user


class TestSummarizeVotes:
    """Counters and viewer vote."""

    def test_counts_and_viewer_vote(self):
        post = make_post(make_user("author"))
        up_a, up_b, down = UserId(uuid4()), UserId(uuid4()), UserId(uuid4())
        post = post.with_votes(frozenset({up_a, up_b}), frozenset({down}))

        summary = summarize_votes(post, down)

        assert summary.score == 1
        assert summary.upvote_count == 2
        assert summary.downvote_count == 1
        assert summary.user_vote is VoteDirection.DOWN

    def test_anonymous_viewer_has_no_vote(self):
        post = make_post(make_user("author"))
        voter = UserId(uuid4())
        post = apply_vote(post, voter, VoteDirection.UP).content

        assert summarize_votes(post, None).user_vote is None


class TestProjectViews:
    """Views never expose the raw vote sets."""

    def test_post_view_fields(self):
        author = make_user("author")
        post = make_post(author, title="Hello", community="science")

        view = project_post(post, None).model_dump()

        assert view["post_id"] == str(post.id)
        assert view["community"] == "science"
        assert "upvoters" not in view
        assert "downvoters" not in view

    def test_comment_view_fields(self):
        author = make_user("author")
        post = make_post(author)
        parent = make_comment(author, post)
        reply = make_comment(author, post, parent=parent)

        view = project_comment(reply, author.id)

        assert view.parent_id == str(parent.id)
        assert view.depth == 1
        assert view.user_vote is None
        assert "upvoters" not in view.model_dump()
