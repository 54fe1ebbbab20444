"""Cookie authentication helpers for routes."""

from fastapi import HTTPException, status

from agora.domain.service import JWTService


def require_user_id(jwt_service: JWTService, auth_token: str | None, action: str) -> str:
    """Resolve the authenticated user ID or fail with 401.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        action: What the user is trying to do, for the error message

    Returns:
        User ID from the token
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id
