"""Invite repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ctfhub.domain.model.invite import Invite
from ctfhub.domain.value import InviteCode, InviteId, TeamId


class InviteRepository(ABC):
    """Repository for Invite entity.

    Defines the contract for invite persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_code(
        self, code: InviteCode, for_update: bool = False
    ) -> Optional[Invite]:
        """Find an invite by its code.

        Used when a user opens or redeems an invite link.

        Args:
            code: The invite code
            for_update: Lock the record until the transaction ends

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_code(self, code: InviteCode) -> bool:
        """Check if an invite with this code exists.

        Used during invite creation to avoid code collisions.

        Args:
            code: The invite code

        Returns:
            True if the code is taken
        """
        pass

    @abstractmethod
    async def save(self, invite: Invite) -> Invite:
        """Save an invite (create or update), including its uses.

        Args:
            invite: The invite to save

        Returns:
            The saved invite
        """
        pass

    @abstractmethod
    async def delete(self, invite_id: InviteId) -> None:
        """Delete an invite.

        Args:
            invite_id: The invite's unique identifier
        """
        pass

    @abstractmethod
    async def delete_by_team(self, team_id: TeamId) -> int:
        """Delete every invite of a team.

        Args:
            team_id: The team's unique identifier

        Returns:
            Number of invites deleted
        """
        pass
