"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from agora.application.projection import CommentView
from agora.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from agora.domain.error import NotFoundError, ValidationError
from agora.domain.service import JWTService
from agora.interface.api.auth import require_user_id

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    text: str = Field(min_length=1, max_length=10000)
    parent_id: str | None = None  # Parent comment ID for replies


@router.post(
    "/{post_id}/comments",
    response_model=CommentView,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentView:
    """Comment on a post or reply to a comment.

    Requires authentication.

    Args:
        post_id: Post UUID
        request: Comment text and optional parent comment ID
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment

    Raises:
        HTTPException: 401 unauthenticated, 404 post or parent not found,
            400 invalid input
    """
    user_id = require_user_id(jwt_service, auth_token, "comment")

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=post_id,
                text=request.text,
                author_id=user_id,
                parent_id=request.parent_id,
            )
        )
    except NotFoundError as e:
        logfire.warn("Comment target not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetCommentsResponse:
    """List a post's comments, oldest first, with the viewer's votes."""
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(
                post_id=post_id,
                viewer_id=jwt_service.get_user_id_from_token(auth_token),
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
