"""Domain model entities for Agora."""

from agora.domain.model.comment import Comment
from agora.domain.model.community import Community
from agora.domain.model.notification import Notification
from agora.domain.model.post import Post
from agora.domain.model.user import User
from agora.domain.model.votable import Votable

__all__ = [
    "User",
    "Post",
    "Comment",
    "Community",
    "Notification",
    "Votable",
]
