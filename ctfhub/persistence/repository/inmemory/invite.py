"""In-memory invite repository for testing."""

from typing import Optional

from ctfhub.domain.model.invite import Invite
from ctfhub.domain.repository.invite import InviteRepository
from ctfhub.domain.value import InviteCode, InviteId, TeamId

from .database import InMemoryDatabase


class InMemoryInviteRepository(InviteRepository):
    """In-memory implementation of InviteRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_code(
        self, code: InviteCode, for_update: bool = False
    ) -> Optional[Invite]:
        """Find an invite by its code."""
        for invite in self._db.invites.values():
            if invite.code == code:
                return invite
        return None

    async def exists_by_code(self, code: InviteCode) -> bool:
        """Check if an invite with this code exists."""
        return await self.find_by_code(code) is not None

    async def save(self, invite: Invite) -> Invite:
        """Save or update an invite."""
        self._db.invites[invite.id] = invite
        return invite

    async def delete(self, invite_id: InviteId) -> None:
        """Delete an invite."""
        self._db.invites.pop(invite_id, None)

    async def delete_by_team(self, team_id: TeamId) -> int:
        """Delete every invite of a team."""
        doomed = [i.id for i in self._db.invites.values() if i.team_id == team_id]
        for invite_id in doomed:
            del self._db.invites[invite_id]
        return len(doomed)
