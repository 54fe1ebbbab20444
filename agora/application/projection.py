"""Read projection of votable content.

Raw vote sets never leave the service. Views expose the counts and the
viewer's own vote, derived from set membership at read time.
"""

from datetime import datetime

from pydantic import BaseModel

from agora.domain.model import Comment, Post, Votable
from agora.domain.value import Handle, UserId, VoteDirection


class VoteSummary(BaseModel):
    """Vote counters plus the viewer's own vote."""

    score: int
    upvote_count: int
    downvote_count: int
    user_vote: VoteDirection | None


class PostView(VoteSummary):
    """Post as seen by one viewer."""

    post_id: str
    title: str
    text: str
    url: str | None
    community: str
    author_id: str
    author_handle: Handle
    comment_count: int
    created_at: datetime
    updated_at: datetime


class CommentView(VoteSummary):
    """Comment as seen by one viewer."""

    comment_id: str
    post_id: str
    parent_id: str | None
    depth: int
    text: str
    author_id: str
    author_handle: Handle
    created_at: datetime
    updated_at: datetime


def summarize_votes(content: Votable, viewer_id: UserId | None) -> VoteSummary:
    """Counters and viewer vote for any votable item.

    Args:
        content: Post or comment
        viewer_id: Authenticated viewer, None for anonymous

    Returns:
        Vote summary; ``user_vote`` is None for anonymous viewers
    """
    return VoteSummary(
        score=content.score,
        upvote_count=len(content.upvoters),
        downvote_count=len(content.downvoters),
        user_vote=content.vote_of(viewer_id),
    )


def project_post(post: Post, viewer_id: UserId | None) -> PostView:
    """Project a post for a viewer."""
    return PostView(
        **summarize_votes(post, viewer_id).model_dump(),
        post_id=str(post.id),
        title=post.title,
        text=post.text,
        url=post.url,
        community=post.community,
        author_id=str(post.author_id),
        author_handle=post.author_handle,
        comment_count=post.comment_count,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


def project_comment(comment: Comment, viewer_id: UserId | None) -> CommentView:
    """Project a comment for a viewer."""
    return CommentView(
        **summarize_votes(comment, viewer_id).model_dump(),
        comment_id=str(comment.id),
        post_id=str(comment.post_id),
        parent_id=str(comment.parent_id) if comment.parent_id else None,
        depth=comment.depth,
        text=comment.text,
        author_id=str(comment.author_id),
        author_handle=comment.author_handle,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )
