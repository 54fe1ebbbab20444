"""Repository interfaces for Agora domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from agora.domain.repository.comment import CommentRepository
from agora.domain.repository.community import CommunityRepository
from agora.domain.repository.notification import NotificationRepository
from agora.domain.repository.post import PostRepository
from agora.domain.repository.transaction import TransactionScope
from agora.domain.repository.user import UserRepository
from agora.domain.repository.votable import VotableRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "CommunityRepository",
    "NotificationRepository",
    "VotableRepository",
    "TransactionScope",
]
