"""CTF repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ctfhub.domain.model.ctf import Ctf
from ctfhub.domain.value import CtfId, TeamId


class CtfRepository(ABC):
    """Repository for CTF entity."""

    @abstractmethod
    async def find_by_id(self, ctf_id: CtfId) -> Optional[Ctf]:
        """Find a CTF by ID.

        Args:
            ctf_id: The CTF's unique identifier

        Returns:
            The CTF if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_team(
        self, team_id: TeamId, include_archived: bool = False
    ) -> list[Ctf]:
        """List a team's CTFs, oldest first.

        Args:
            team_id: The team's unique identifier
            include_archived: Whether archived CTFs are included

        Returns:
            List of CTFs
        """
        pass

    @abstractmethod
    async def save(self, ctf: Ctf) -> Ctf:
        """Save a CTF (create or update)."""
        pass

    @abstractmethod
    async def delete_by_team(self, team_id: TeamId) -> int:
        """Delete every CTF of a team.

        Returns:
            Number of CTFs deleted
        """
        pass
