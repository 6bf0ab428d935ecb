"""PostgreSQL implementation of Invite repository."""

from typing import Optional

from sqlalchemy import delete, exists, select
from sqlalchemy.dialects.postgresql import insert

from ctfhub.domain.model.invite import Invite
from ctfhub.domain.repository import InviteRepository
from ctfhub.domain.value import InviteCode, InviteId, TeamId
from ctfhub.persistence.mappers import invite_to_dict, row_to_invite
from ctfhub.persistence.repository.base import PostgresRepository
from ctfhub.persistence.tables import invite_uses_table, invites_table

# Fixed at creation. Leaving the unique code out of the upsert keeps its
# row lock at FOR NO KEY UPDATE.
_IMMUTABLE = {"id", "code", "team_id", "created_by", "created_at"}


class PostgresInviteRepository(PostgresRepository, InviteRepository):
    """PostgreSQL implementation of InviteRepository."""

    async def find_by_code(
        self, code: InviteCode, for_update: bool = False
    ) -> Optional[Invite]:
        """Find an invite by its code.

        Args:
            code: The invite code
            for_update: Lock the invite row until the transaction ends

        Returns:
            Invite if found, None otherwise
        """
        stmt = select(invites_table).where(invites_table.c.code == code.root)
        if for_update:
            stmt = stmt.with_for_update(key_share=True)
        result = await self._execute(stmt)
        row = result.mappings().first()
        if not row:
            return None

        uses = await self._execute(
            select(invite_uses_table.c.user_id)
            .where(invite_uses_table.c.invite_id == row["id"])
            .order_by(invite_uses_table.c.position)
        )
        return row_to_invite(dict(row), list(uses.scalars()))

    async def exists_by_code(self, code: InviteCode) -> bool:
        """Check if an invite with this code exists."""
        stmt = select(exists().where(invites_table.c.code == code.root))
        result = await self._execute(stmt)
        return bool(result.scalar())

    async def save(self, invite: Invite) -> Invite:
        """Save an invite (create or update) and sync its uses."""
        invite_dict = invite_to_dict(invite)
        stmt = insert(invites_table).values(**invite_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[invites_table.c.id],
            set_={k: v for k, v in invite_dict.items() if k not in _IMMUTABLE},
        )
        await self._execute(stmt)

        await self._sync_links(
            invite_uses_table, "invite_id", invite.id, "user_id", invite.uses
        )

        await self.session.flush()
        return invite

    async def delete(self, invite_id: InviteId) -> None:
        """Delete an invite and its uses."""
        await self._execute(delete(invites_table).where(invites_table.c.id == invite_id))
        await self.session.flush()

    async def delete_by_team(self, team_id: TeamId) -> int:
        """Delete every invite of a team."""
        result = await self._execute(
            delete(invites_table).where(invites_table.c.team_id == team_id)
        )
        await self.session.flush()
        return result.rowcount
