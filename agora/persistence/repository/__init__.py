"""PostgreSQL repository implementations."""

from agora.persistence.repository.comment import PostgresCommentRepository
from agora.persistence.repository.community import PostgresCommunityRepository
from agora.persistence.repository.notification import PostgresNotificationRepository
from agora.persistence.repository.post import PostgresPostRepository
from agora.persistence.repository.transaction import PostgresTransactionScope
from agora.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresCommunityRepository",
    "PostgresNotificationRepository",
    "PostgresTransactionScope",
]
