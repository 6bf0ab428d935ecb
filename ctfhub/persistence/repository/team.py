"""PostgreSQL implementation of Team repository."""

from typing import Optional

import logfire
from sqlalchemy import delete, exists, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ctfhub.domain.error import ConflictError
from ctfhub.domain.model import Team
from ctfhub.domain.repository import TeamRepository
from ctfhub.domain.value import TeamId, TeamName
from ctfhub.persistence.error import PersistenceError
from ctfhub.persistence.mappers import row_to_team, team_to_dict
from ctfhub.persistence.repository.base import PostgresRepository
from ctfhub.persistence.tables import invites_table, team_members_table, teams_table


class PostgresTeamRepository(PostgresRepository, TeamRepository):
    """PostgreSQL implementation of TeamRepository.

    ``Team.invite_ids`` is read from the ``invites`` table and ignored on
    save; invites are written through the invite repository.
    """

    async def find_by_id(
        self, team_id: TeamId, for_update: bool = False
    ) -> Optional[Team]:
        """Find a team by ID.

        Args:
            team_id: Team ID to look up
            for_update: Lock the team row until the transaction ends

        Returns:
            Team if found, None otherwise
        """
        stmt = select(teams_table).where(teams_table.c.id == team_id)
        if for_update:
            stmt = stmt.with_for_update(key_share=True)
        result = await self._execute(stmt)
        row = result.mappings().first()
        if not row:
            return None

        members = await self._execute(
            select(team_members_table.c.user_id)
            .where(team_members_table.c.team_id == team_id)
            .order_by(team_members_table.c.position)
        )
        invites = await self._execute(
            select(invites_table.c.id)
            .where(invites_table.c.team_id == team_id)
            .order_by(invites_table.c.created_at, invites_table.c.id)
        )
        return row_to_team(dict(row), list(members.scalars()), list(invites.scalars()))

    async def exists_by_name(self, name: TeamName) -> bool:
        """Check whether a team with this (normalized) name exists."""
        stmt = select(exists().where(teams_table.c.name == name.root))
        result = await self._execute(stmt)
        return bool(result.scalar())

    async def save(self, team: Team) -> Team:
        """Save a team (create or update) and sync its member list.

        The row is updated in place and only inserted when absent. An
        ``ON CONFLICT DO UPDATE`` that sets the unique ``name`` column would
        take ``FOR UPDATE`` on every save; a plain UPDATE only does so when
        the name actually changes.

        Raises:
            ConflictError: If another team already holds the name
        """
        team_dict = team_to_dict(team)
        try:
            result = await self.session.execute(
                update(teams_table)
                .where(teams_table.c.id == team.id)
                .values({k: v for k, v in team_dict.items() if k != "id"})
            )
            if result.rowcount == 0:
                await self.session.execute(teams_table.insert().values(**team_dict))
        except IntegrityError as e:
            logfire.warn("Team name taken", name=team.name.root, error=str(e))
            raise ConflictError(
                f"Team {team.name.root} already exists",
                error_code="error_team_exists",
            ) from e
        except SQLAlchemyError as e:
            logfire.error("Database statement failed", repository="team", error=str(e))
            raise PersistenceError(str(e)) from e

        await self._sync_links(
            team_members_table, "team_id", team.id, "user_id", team.member_ids
        )

        await self.session.flush()
        return team

    async def delete(self, team_id: TeamId) -> None:
        """Delete a team; member rows go with it through the cascade."""
        await self._execute(delete(teams_table).where(teams_table.c.id == team_id))
        await self.session.flush()
