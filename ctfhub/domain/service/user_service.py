"""User domain service."""

import logfire

from ctfhub.domain.error import NotFoundError
from ctfhub.domain.model import User
from ctfhub.domain.repository import UserRepository
from ctfhub.domain.value import TeamId, UserId, Username, utcnow

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId, for_update: bool = False) -> User:
        """Get user by ID.

        Args:
            user_id: User ID
            for_update: Lock the record for the rest of the transaction

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id, for_update=for_update)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User found", user_id=str(user_id), username=user.username.root)
            return user

    async def get_many(
        self, user_ids: list[UserId], for_update: bool = False
    ) -> list[User]:
        """Get several users, skipping IDs that no longer exist.

        Args:
            user_ids: User IDs
            for_update: Lock the records, in ascending ID order, for the
                rest of the transaction

        Returns:
            Users found
        """
        with logfire.span("user_service.get_many", count=len(user_ids)):
            if not user_ids:
                return []
            users = await self.user_repository.find_many(
                user_ids, for_update=for_update
            )
            if len(users) != len(set(user_ids)):
                logfire.warn(
                    "Some users not found",
                    requested=len(set(user_ids)),
                    found=len(users),
                )
            return users

    async def save(self, user: User) -> User:
        """Save user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        with logfire.span(
            "user_service.save", user_id=str(user.id), username=user.username.root
        ):
            saved = await self.user_repository.save(user)
            logfire.info("User saved", user_id=str(saved.id))
            return saved

    async def add_team(self, user: User, team_id: TeamId) -> User:
        """Record that the user joined a team.

        Args:
            user: User joining
            team_id: Team joined

        Returns:
            Saved user
        """
        with logfire.span(
            "user_service.add_team", user_id=str(user.id), team_id=str(team_id)
        ):
            return await self.save(user.with_team(team_id))

    async def remove_team(self, user: User, team_id: TeamId) -> User:
        """Record that the user is no longer in a team.

        Args:
            user: User leaving
            team_id: Team left

        Returns:
            Saved user
        """
        with logfire.span(
            "user_service.remove_team", user_id=str(user.id), team_id=str(team_id)
        ):
            return await self.save(user.without_team(team_id))

    async def update_details(
        self,
        user: User,
        username: Username | None = None,
        email: str | None = None,
    ) -> User:
        """Update a user's profile details.

        Only provided fields change; the admin flag and memberships never
        change through this path.

        Args:
            user: User to update
            username: New username
            email: New email

        Returns:
            Saved user
        """
        with logfire.span("user_service.update_details", user_id=str(user.id)):
            updated = user.model_copy(
                update={
                    "username": username if username is not None else user.username,
                    "email": email if email is not None else user.email,
                    "updated_at": utcnow(),
                }
            )
            return await self.save(updated)
