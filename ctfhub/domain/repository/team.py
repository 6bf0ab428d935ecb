"""Team repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ctfhub.domain.model.team import Team
from ctfhub.domain.value import TeamId, TeamName


class TeamRepository(ABC):
    """Repository for Team aggregate."""

    @abstractmethod
    async def find_by_id(
        self, team_id: TeamId, for_update: bool = False
    ) -> Optional[Team]:
        """Find a team by ID.

        Args:
            team_id: The team's unique identifier
            for_update: Lock the record until the transaction ends

        Returns:
            The team if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_name(self, name: TeamName) -> bool:
        """Check whether a team with this (normalized) name exists.

        Args:
            name: The team name

        Returns:
            True if a team already uses the name
        """
        pass

    @abstractmethod
    async def save(self, team: Team) -> Team:
        """Save a team (create or update), including its member list.

        Args:
            team: The team to save

        Returns:
            The saved team

        Raises:
            ConflictError: If another team already uses the name
        """
        pass

    @abstractmethod
    async def delete(self, team_id: TeamId) -> None:
        """Delete a team.

        Args:
            team_id: The team's unique identifier
        """
        pass
