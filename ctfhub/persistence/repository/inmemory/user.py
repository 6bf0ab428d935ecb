"""In-memory user repository for testing."""

from typing import Optional

from ctfhub.domain.model.user import User
from ctfhub.domain.repository.user import UserRepository
from ctfhub.domain.value import UserId

from .database import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(
        self, user_id: UserId, for_update: bool = False
    ) -> Optional[User]:
        """Find a user by ID."""
        return self._db.users.get(user_id)

    async def find_many(
        self, user_ids: list[UserId], for_update: bool = False
    ) -> list[User]:
        """Find several users, preserving order and skipping unknown IDs."""
        return [
            self._db.users[user_id]
            for user_id in dict.fromkeys(user_ids)
            if user_id in self._db.users
        ]

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._db.users[user.id] = user
        return user
