"""Vote routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from agora.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from agora.domain.error import (
    ConcurrencyConflictError,
    NotFoundError,
    ValidationError,
)
from agora.domain.service import JWTService
from agora.domain.value import VotableType
from agora.interface.api.auth import require_user_id

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


async def _cast_vote(
    votable_type: VotableType,
    votable_id: str,
    direction: str,
    use_case: CastVoteUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
) -> CastVoteResponse:
    user_id = require_user_id(jwt_service, auth_token, "vote")

    try:
        request = CastVoteRequest(
            votable_type=votable_type,
            votable_id=votable_id,
            user_id=user_id,
            direction=direction,
        )
        return await use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ConcurrencyConflictError as e:
        logfire.warn("Vote abandoned after repeated conflicts", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="The item is being voted on heavily, please retry",
        )
    except (ValidationError, ValueError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post("/posts/{post_id}/vote/{direction}", response_model=CastVoteResponse)
async def vote_on_post(
    post_id: str,
    direction: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Upvote or downvote a post.

    Repeating the vote you already hold retracts it; voting the other way
    switches it. Requires authentication.

    Args:
        post_id: Post UUID
        direction: ``up``/``upvote`` or ``down``/``downvote``
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Score, counters and your current vote

    Raises:
        HTTPException: 401 unauthenticated, 400 invalid or self vote,
            404 post not found, 409 persistent write conflict
    """
    return await _cast_vote(
        VotableType.POST,
        post_id,
        direction,
        cast_vote_use_case,
        jwt_service,
        auth_token,
    )


@router.post(
    "/comments/{comment_id}/vote/{direction}", response_model=CastVoteResponse
)
async def vote_on_comment(
    comment_id: str,
    direction: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Upvote or downvote a comment.

    Same toggle rules as posts. Requires authentication.
    """
    return await _cast_vote(
        VotableType.COMMENT,
        comment_id,
        direction,
        cast_vote_use_case,
        jwt_service,
        auth_token,
    )
