"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from agora.domain.model import Comment, Community, Post, User
from agora.domain.value import (
    CommentId,
    CommunityId,
    CommunityName,
    Handle,
    PostId,
    UserId,
)

# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_user(handle: str = "alice", karma: int = 0) -> User:
    """Build a user with a fresh ID."""
    return User(id=UserId(uuid4()), handle=Handle(root=handle), karma=karma)


def make_community(creator: User, name: str = "general") -> Community:
    """Build a community founded by ``creator``."""
    return Community(
        id=CommunityId(uuid4()),
        name=CommunityName(name),
        display_name=name.title(),
        created_by=creator.id,
    )


def make_post(
    author: User,
    title: str = "Test Post",
    community: str = "general",
    age: timedelta = timedelta(0),
) -> Post:
    """Build a post with an empty vote state.

    Args:
        author: Post author
        title: Post title
        community: Community the post belongs to
        age: How long ago the post was created
    """
    created_at = datetime.now(timezone.utc) - age
    return Post(
        id=PostId(uuid4()),
        author_id=author.id,
        author_handle=author.handle,
        title=title,
        text="Test content",
        community=community,
        created_at=created_at,
        updated_at=created_at,
    )


def make_comment(
    author: User, post: Post, parent: Comment | None = None, text: str = "Nice post"
) -> Comment:
    """Build a comment (or reply) with an empty vote state."""
    return Comment(
        id=CommentId(uuid4()),
        post_id=post.id,
        author_id=author.id,
        author_handle=author.handle,
        text=text,
        parent_id=parent.id if parent else None,
        depth=parent.depth + 1 if parent else 0,
    )
