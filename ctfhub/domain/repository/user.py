"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ctfhub.domain.model.user import User
from ctfhub.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, user_id: UserId, for_update: bool = False
    ) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier
            for_update: Lock the record until the transaction ends

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_many(
        self, user_ids: list[UserId], for_update: bool = False
    ) -> list[User]:
        """Find several users by ID.

        Missing IDs are skipped.

        Args:
            user_ids: IDs to look up
            for_update: Lock the records, in ascending ID order, until the
                transaction ends

        Returns:
            The users found, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update), including its team memberships.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
