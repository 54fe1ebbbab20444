"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .community_service import CommunityService
from .jwt_service import JWTService
from .notification_service import NotificationService
from .post_service import PostService
from .reputation_service import ReputationService
from .user_service import UserService
from .vote_ledger import VoteTransition, apply_vote, contribution
from .vote_service import VoteService

__all__ = [
    "CommentService",
    "CommunityService",
    "JWTService",
    "NotificationService",
    "PostService",
    "ReputationService",
    "Service",
    "UserService",
    "VoteService",
    "VoteTransition",
    "apply_vote",
    "contribution",
]
