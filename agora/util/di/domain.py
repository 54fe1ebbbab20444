"""Domain layer DI providers."""

from dishka import Scope, provide

from agora.config import AuthSettings, VotingSettings
from agora.domain.repository import (
    CommentRepository,
    CommunityRepository,
    NotificationRepository,
    PostRepository,
    TransactionScope,
    UserRepository,
)
from agora.domain.service import (
    CommentService,
    CommunityService,
    JWTService,
    NotificationService,
    PostService,
    ReputationService,
    UserService,
    VoteService,
)
from agora.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_community_service(
        self, community_repository: CommunityRepository
    ) -> CommunityService:
        """Provide community domain service."""
        return CommunityService(community_repository=community_repository)

    @provide
    def get_reputation_service(
        self, user_repository: UserRepository
    ) -> ReputationService:
        """Provide karma domain service."""
        return ReputationService(user_repository=user_repository)

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        user_repository: UserRepository,
        post_repository: PostRepository,
        transaction_scope: TransactionScope,
        voting_settings: VotingSettings,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            user_repository=user_repository,
            post_repository=post_repository,
            transaction_scope=transaction_scope,
            voting_settings=voting_settings,
        )

    @provide
    def get_vote_service(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        reputation_service: ReputationService,
        notification_service: NotificationService,
        voting_settings: VotingSettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            post_repository=post_repository,
            comment_repository=comment_repository,
            reputation_service=reputation_service,
            notification_service=notification_service,
            voting_settings=voting_settings,
        )
