"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from agora.domain.model.user import User
from agora.domain.value import Handle, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by their handle.

        Args:
            handle: The user's handle

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def adjust_karma(self, user_id: UserId, delta: int) -> bool:
        """Atomically add ``delta`` (may be negative) to the user's karma.

        Args:
            user_id: The user's unique identifier
            delta: Signed karma change

        Returns:
            True if the user exists and was updated, False otherwise
        """
        pass
