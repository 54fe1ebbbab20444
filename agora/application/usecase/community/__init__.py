"""Community use cases."""

from .create_community import CreateCommunityRequest, CreateCommunityUseCase
from .get_community import CommunityView, GetCommunityRequest, GetCommunityUseCase
from .list_communities import (
    CheckCommunityNameRequest,
    CheckCommunityNameUseCase,
    ListCommunitiesRequest,
    ListCommunitiesResponse,
    ListCommunitiesUseCase,
    NameAvailability,
)
from .membership import (
    JoinCommunityUseCase,
    LeaveCommunityUseCase,
    MembershipRequest,
    MembershipResponse,
)

__all__ = [
    "CheckCommunityNameRequest",
    "CheckCommunityNameUseCase",
    "CommunityView",
    "CreateCommunityRequest",
    "CreateCommunityUseCase",
    "GetCommunityRequest",
    "GetCommunityUseCase",
    "JoinCommunityUseCase",
    "LeaveCommunityUseCase",
    "ListCommunitiesRequest",
    "ListCommunitiesResponse",
    "ListCommunitiesUseCase",
    "MembershipRequest",
    "MembershipResponse",
    "NameAvailability",
]
