"""Application layer DI providers."""

from dishka import Scope, provide

from agora.application.usecase.comment import CreateCommentUseCase, GetCommentsUseCase
from agora.application.usecase.community import (
    CheckCommunityNameUseCase,
    CreateCommunityUseCase,
    GetCommunityUseCase,
    JoinCommunityUseCase,
    LeaveCommunityUseCase,
    ListCommunitiesUseCase,
)
from agora.application.usecase.notification import (
    ClearNotificationsUseCase,
    DeleteNotificationUseCase,
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)
from agora.application.usecase.post import (
    CreatePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
)
from agora.application.usecase.user import GetUserProfileUseCase
from agora.application.usecase.vote import CastVoteUseCase
from agora.domain.service import (
    CommentService,
    CommunityService,
    NotificationService,
    PostService,
    UserService,
    VoteService,
)
from agora.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Vote use cases
    @provide
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    # Post use cases
    @provide
    def get_create_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        community_service: CommunityService,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            user_service=user_service,
            community_service=community_service,
        )

    @provide
    def get_get_post_use_case(self, post_service: PostService) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service)

    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    # Community use cases
    @provide
    def get_create_community_use_case(
        self, community_service: CommunityService, user_service: UserService
    ) -> CreateCommunityUseCase:
        """Provide create community use case."""
        return CreateCommunityUseCase(
            community_service=community_service, user_service=user_service
        )

    @provide
    def get_get_community_use_case(
        self, community_service: CommunityService
    ) -> GetCommunityUseCase:
        """Provide get community use case."""
        return GetCommunityUseCase(community_service=community_service)

    @provide
    def get_list_communities_use_case(
        self, community_service: CommunityService
    ) -> ListCommunitiesUseCase:
        """Provide list communities use case."""
        return ListCommunitiesUseCase(community_service=community_service)

    @provide
    def get_check_community_name_use_case(
        self, community_service: CommunityService
    ) -> CheckCommunityNameUseCase:
        """Provide name availability use case."""
        return CheckCommunityNameUseCase(community_service=community_service)

    @provide
    def get_join_community_use_case(
        self, community_service: CommunityService
    ) -> JoinCommunityUseCase:
        """Provide join community use case."""
        return JoinCommunityUseCase(community_service=community_service)

    @provide
    def get_leave_community_use_case(
        self, community_service: CommunityService
    ) -> LeaveCommunityUseCase:
        """Provide leave community use case."""
        return LeaveCommunityUseCase(community_service=community_service)

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        notification_service: NotificationService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
            notification_service=notification_service,
        )

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, post_service=post_service
        )

    # User use cases
    @provide
    def get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    # Notification use cases
    @provide
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide
    def get_unread_count_use_case(
        self, notification_service: NotificationService
    ) -> GetUnreadCountUseCase:
        """Provide unread count use case."""
        return GetUnreadCountUseCase(notification_service=notification_service)

    @provide
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationReadUseCase:
        """Provide mark read use case."""
        return MarkNotificationReadUseCase(notification_service=notification_service)

    @provide
    def get_mark_all_notifications_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllNotificationsReadUseCase:
        """Provide mark all read use case."""
        return MarkAllNotificationsReadUseCase(
            notification_service=notification_service
        )

    @provide
    def get_delete_notification_use_case(
        self, notification_service: NotificationService
    ) -> DeleteNotificationUseCase:
        """Provide delete notification use case."""
        return DeleteNotificationUseCase(notification_service=notification_service)

    @provide
    def get_clear_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ClearNotificationsUseCase:
        """Provide clear notifications use case."""
        return ClearNotificationsUseCase(notification_service=notification_service)
