"""Community routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, Field

from agora.application.usecase.community import (
    CheckCommunityNameRequest,
    CheckCommunityNameUseCase,
    CommunityView,
    CreateCommunityRequest,
    CreateCommunityUseCase,
    GetCommunityRequest,
    GetCommunityUseCase,
    JoinCommunityUseCase,
    LeaveCommunityUseCase,
    ListCommunitiesRequest,
    ListCommunitiesResponse,
    ListCommunitiesUseCase,
    MembershipRequest,
    MembershipResponse,
    NameAvailability,
)
from agora.domain.error import NotFoundError, ValidationError
from agora.domain.service import JWTService
from agora.domain.value import CommunitySort
from agora.interface.api.auth import require_user_id

router = APIRouter(prefix="/communities", tags=["communities"], route_class=DishkaRoute)


class CreateCommunityAPIRequest(BaseModel):
    """API request for creating a community."""

    name: str = Field(min_length=1, max_length=50)
    display_name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str = Field(default="", max_length=500)
    is_public: bool = True


@router.get("", response_model=ListCommunitiesResponse)
async def list_communities(
    list_communities_use_case: FromDishka[ListCommunitiesUseCase],
    sort: CommunitySort = CommunitySort.NEW,
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListCommunitiesResponse:
    """List communities, newest first unless sorted by popularity."""
    return await list_communities_use_case.execute(
        ListCommunitiesRequest(sort=sort, limit=limit, offset=offset)
    )


@router.get("/popular", response_model=ListCommunitiesResponse)
async def popular_communities(
    list_communities_use_case: FromDishka[ListCommunitiesUseCase],
    limit: int = Query(default=10, ge=1, le=100),
) -> ListCommunitiesResponse:
    """Communities with the most members."""
    return await list_communities_use_case.execute(
        ListCommunitiesRequest(sort=CommunitySort.POPULAR, limit=limit)
    )


@router.get("/check/{name}", response_model=NameAvailability)
async def check_name(
    name: str,
    check_name_use_case: FromDishka[CheckCommunityNameUseCase],
) -> NameAvailability:
    """Check whether a community name can still be claimed."""
    return await check_name_use_case.execute(CheckCommunityNameRequest(name=name))


@router.post("", response_model=CommunityView, status_code=status.HTTP_201_CREATED)
async def create_community(
    request: CreateCommunityAPIRequest,
    create_community_use_case: FromDishka[CreateCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommunityView:
    """Create a community; the creator becomes its first member.

    Raises:
        HTTPException: 401 not signed in, 400 malformed or taken name
    """
    user_id = require_user_id(jwt_service, auth_token, "create communities")

    try:
        return await create_community_use_case.execute(
            CreateCommunityRequest(
                name=request.name,
                display_name=request.display_name,
                description=request.description,
                is_public=request.is_public,
                creator_id=user_id,
            )
        )
    except NotFoundError as e:
        logfire.warn("Community creator not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
        )
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{name}", response_model=CommunityView)
async def get_community(
    name: str,
    get_community_use_case: FromDishka[GetCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommunityView:
    """Get a community; signed-in viewers also see whether they are members."""
    try:
        return await get_community_use_case.execute(
            GetCommunityRequest(
                name=name, viewer_id=jwt_service.get_user_id_from_token(auth_token)
            )
        )
    except (NotFoundError, ValueError) as e:
        # A malformed name can't exist either
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{name}/join", response_model=MembershipResponse)
async def join_community(
    name: str,
    join_community_use_case: FromDishka[JoinCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MembershipResponse:
    """Join a community.

    Raises:
        HTTPException: 404 community not found, 400 already a member
    """
    user_id = require_user_id(jwt_service, auth_token, "join communities")
    try:
        return await join_community_use_case.execute(
            MembershipRequest(name=name, user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/{name}/leave", response_model=MembershipResponse)
async def leave_community(
    name: str,
    leave_community_use_case: FromDishka[LeaveCommunityUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MembershipResponse:
    """Leave a community.

    Raises:
        HTTPException: 404 community not found, 400 creator or not a member
    """
    user_id = require_user_id(jwt_service, auth_token, "leave communities")
    try:
        return await leave_community_use_case.execute(
            MembershipRequest(name=name, user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
