"""PostgreSQL implementation of User repository."""

from collections import defaultdict
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert

from ctfhub.domain.model import User
from ctfhub.domain.repository import UserRepository
from ctfhub.domain.value import UserId
from ctfhub.persistence.mappers import row_to_user, user_to_dict
from ctfhub.persistence.repository.base import PostgresRepository
from ctfhub.persistence.tables import user_teams_table, users_table


class PostgresUserRepository(PostgresRepository, UserRepository):
    """PostgreSQL implementation of UserRepository."""

    async def find_by_id(
        self, user_id: UserId, for_update: bool = False
    ) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up
            for_update: Lock the user row until the transaction ends

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        if for_update:
            stmt = stmt.with_for_update(key_share=True)
        result = await self._execute(stmt)
        row = result.mappings().first()
        if not row:
            return None

        team_ids = await self._team_ids([user_id])
        return row_to_user(dict(row), team_ids[user_id])

    async def find_many(
        self, user_ids: list[UserId], for_update: bool = False
    ) -> list[User]:
        """Find several users, preserving the order of ``user_ids``.

        With ``for_update`` the rows are locked in ascending ID order.
        """
        if not user_ids:
            return []

        stmt = select(users_table).where(users_table.c.id.in_(user_ids))
        if for_update:
            stmt = stmt.order_by(users_table.c.id).with_for_update(key_share=True)
        result = await self._execute(stmt)
        rows = {row["id"]: dict(row) for row in result.mappings()}

        team_ids = await self._team_ids(list(rows))
        return [
            row_to_user(rows[user_id], team_ids[user_id])
            for user_id in dict.fromkeys(user_ids)
            if user_id in rows
        ]

    async def save(self, user: User) -> User:
        """Save a user (create or update) and sync its memberships.

        Args:
            user: User to save

        Returns:
            Saved user
        """
        user_dict = user_to_dict(user)
        stmt = insert(users_table).values(**user_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={k: v for k, v in user_dict.items() if k != "id"},
        )
        await self._execute(stmt)

        await self._sync_links(
            user_teams_table, "user_id", user.id, "team_id", user.team_ids
        )

        await self.session.flush()
        return user

    async def _team_ids(self, user_ids: list[UUID]) -> dict[UUID, list[UUID]]:
        stmt = (
            select(user_teams_table.c.user_id, user_teams_table.c.team_id)
            .where(user_teams_table.c.user_id.in_(user_ids))
            .order_by(user_teams_table.c.user_id, user_teams_table.c.position)
        )
        result = await self._execute(stmt)
        grouped: dict[UUID, list[UUID]] = defaultdict(list)
        for row in result.mappings():
            grouped[row["user_id"]].append(row["team_id"])
        return grouped
