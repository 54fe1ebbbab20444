"""User domain service."""

import logfire

from agora.domain.error import NotFoundError
from agora.domain.model import User
from agora.domain.repository import UserRepository
from agora.domain.value import Handle, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_handle(self, handle: Handle) -> User:
        """Get user by handle.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_handle", handle=handle.root):
            user = await self.user_repository.find_by_handle(handle)
            if not user:
                logfire.warn("User not found", handle=handle.root)
                raise NotFoundError("User", handle.root)
            return user
