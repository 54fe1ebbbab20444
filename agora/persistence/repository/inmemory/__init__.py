"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .community import InMemoryCommunityRepository
from .notification import InMemoryNotificationRepository
from .post import InMemoryPostRepository
from .transaction import InMemoryTransactionScope
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryCommunityRepository",
    "InMemoryNotificationRepository",
    "InMemoryPostRepository",
    "InMemoryTransactionScope",
    "InMemoryUserRepository",
]
