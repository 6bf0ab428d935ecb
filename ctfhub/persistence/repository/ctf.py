"""PostgreSQL implementation of CTF repository."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert

from ctfhub.domain.model import Ctf
from ctfhub.domain.repository import CtfRepository
from ctfhub.domain.value import CtfId, TeamId
from ctfhub.persistence.mappers import ctf_to_dict, row_to_ctf
from ctfhub.persistence.repository.base import PostgresRepository
from ctfhub.persistence.tables import ctfs_table


class PostgresCtfRepository(PostgresRepository, CtfRepository):
    """PostgreSQL implementation of CtfRepository."""

    async def find_by_id(self, ctf_id: CtfId) -> Optional[Ctf]:
        stmt = select(ctfs_table).where(ctfs_table.c.id == ctf_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_ctf(dict(row)) if row else None

    async def find_by_team(
        self, team_id: TeamId, include_archived: bool = False
    ) -> list[Ctf]:
        stmt = (
            select(ctfs_table)
            .where(ctfs_table.c.team_id == team_id)
            .order_by(ctfs_table.c.created_at, ctfs_table.c.id)
        )
        if not include_archived:
            stmt = stmt.where(ctfs_table.c.archived.is_(False))
        result = await self._execute(stmt)
        return [row_to_ctf(dict(row)) for row in result.mappings()]

    async def save(self, ctf: Ctf) -> Ctf:
        ctf_dict = ctf_to_dict(ctf)
        stmt = insert(ctfs_table).values(**ctf_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[ctfs_table.c.id],
            set_={k: v for k, v in ctf_dict.items() if k != "id"},
        )
        await self._execute(stmt)
        await self.session.flush()
        return ctf

    async def delete_by_team(self, team_id: TeamId) -> int:
        result = await self._execute(
            delete(ctfs_table).where(ctfs_table.c.team_id == team_id)
        )
        await self.session.flush()
        return result.rowcount
