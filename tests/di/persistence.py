"""Mock persistence providers for testing."""

from dishka import Scope, provide

from agora.domain.repository import (
    CommentRepository,
    CommunityRepository,
    NotificationRepository,
    PostRepository,
    TransactionScope,
    UserRepository,
)
from agora.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryCommunityRepository,
    InMemoryNotificationRepository,
    InMemoryPostRepository,
    InMemoryTransactionScope,
    InMemoryUserRepository,
)
from agora.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so state survives across the requests made
    through one container (e.g. several calls from a TestClient). Each test
    builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_community_repository(self) -> CommunityRepository:
        """Provide in-memory community repository."""
        return InMemoryCommunityRepository()

    @provide(scope=Scope.APP)
    def get_notification_repository(self) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository()

    @provide(scope=Scope.APP)
    def get_transaction_scope(self) -> TransactionScope:
        """Provide in-memory transaction scope."""
        return InMemoryTransactionScope()
