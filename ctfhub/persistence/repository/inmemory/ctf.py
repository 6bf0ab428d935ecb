"""In-memory CTF repository for testing."""

from typing import Optional

from ctfhub.domain.model.ctf import Ctf
from ctfhub.domain.repository.ctf import CtfRepository
from ctfhub.domain.value import CtfId, TeamId

from .database import InMemoryDatabase


class InMemoryCtfRepository(CtfRepository):
    """In-memory implementation of CtfRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self._db = database or InMemoryDatabase()

    async def find_by_id(self, ctf_id: CtfId) -> Optional[Ctf]:
        return self._db.ctfs.get(ctf_id)

    async def find_by_team(
        self, team_id: TeamId, include_archived: bool = False
    ) -> list[Ctf]:
        ctfs = [
            ctf
            for ctf in self._db.ctfs.values()
            if ctf.team_id == team_id and (include_archived or not ctf.archived)
        ]
        return sorted(ctfs, key=lambda ctf: ctf.created_at)

    async def save(self, ctf: Ctf) -> Ctf:
        self._db.ctfs[ctf.id] = ctf
        return ctf

    async def delete_by_team(self, team_id: TeamId) -> int:
        doomed = [c.id for c in self._db.ctfs.values() if c.team_id == team_id]
        for ctf_id in doomed:
            del self._db.ctfs[ctf_id]
        return len(doomed)
