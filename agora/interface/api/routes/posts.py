"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, Field

from agora.application.projection import PostView
from agora.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
)
from agora.domain.error import NotFoundError
from agora.domain.service import JWTService
from agora.domain.value import PostSort
from agora.interface.api.auth import require_user_id

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(min_length=1, max_length=300)
    text: str = Field(min_length=1, max_length=40000)
    url: str | None = None
    community: str = Field(min_length=1, max_length=50)


@router.post("", response_model=PostView, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostView:
    """Create a new post.

    Requires authentication.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created post

    Raises:
        HTTPException: 401 not signed in, 404 community not found
    """
    user_id = require_user_id(jwt_service, auth_token, "create posts")

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                title=request.title,
                text=request.text,
                url=request.url,
                community=request.community,
                author_id=user_id,
            )
        )
    except NotFoundError as e:
        if e.resource == "Community":
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        # Token for a user that no longer exists
        logfire.warn("Post author not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    sort: PostSort = PostSort.NEW,
    community: str | None = None,
    limit: int = Query(default=25, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListPostsResponse:
    """List posts, newest or top first.

    Authentication is optional; signed-in viewers get their own vote on
    each post.
    """
    return await list_posts_use_case.execute(
        ListPostsRequest(
            sort=sort,
            community=community,
            limit=limit,
            offset=offset,
            viewer_id=jwt_service.get_user_id_from_token(auth_token),
        )
    )


@router.get("/{post_id}", response_model=PostView)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> PostView:
    """Get a single post.

    Raises:
        HTTPException: 400 malformed ID, 404 post not found
    """
    try:
        return await get_post_use_case.execute(
            GetPostRequest(
                post_id=post_id,
                viewer_id=jwt_service.get_user_id_from_token(auth_token),
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
