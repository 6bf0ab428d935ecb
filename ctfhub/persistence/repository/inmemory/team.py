"""In-memory team repository for testing."""

from typing import Optional

from ctfhub.domain.error import ConflictError
from ctfhub.domain.model.team import Team
from ctfhub.domain.repository.team import TeamRepository
from ctfhub.domain.value import TeamId, TeamName

from .database import InMemoryDatabase


class InMemoryTeamRepository(TeamRepository):
    """In-memory implementation of TeamRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(
        self, team_id: TeamId, for_update: bool = False
    ) -> Optional[Team]:
        """Find a team by ID."""
        return self._db.teams.get(team_id)

    async def exists_by_name(self, name: TeamName) -> bool:
        """Check whether a team with this name exists."""
        return any(team.name == name for team in self._db.teams.values())

    async def save(self, team: Team) -> Team:
        """Save or update a team, enforcing unique names like the DB index."""
        for other in self._db.teams.values():
            if other.id != team.id and other.name == team.name:
                raise ConflictError(
                    f"Team {team.name.root} already exists",
                    error_code="error_team_exists",
                )
        self._db.teams[team.id] = team
        return team

    async def delete(self, team_id: TeamId) -> None:
        """Delete a team."""
        self._db.teams.pop(team_id, None)
