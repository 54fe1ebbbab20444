"""In-memory user repository for testing."""

from typing import Optional

from agora.domain.model.user import User
from agora.domain.repository.user import UserRepository
from agora.domain.value import Handle, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_handle(self, handle: Handle) -> Optional[User]:
        """Find a user by their handle."""
        for user in self._users.values():
            if user.handle == handle:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    async def adjust_karma(self, user_id: UserId, delta: int) -> bool:
        """Add a signed delta to the user's karma."""
        user = self._users.get(user_id)
        if not user:
            return False
        self._users[user_id] = user.model_copy(update={"karma": user.karma + delta})
        return True
