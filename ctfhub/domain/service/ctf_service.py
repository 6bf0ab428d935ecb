"""CTF domain service."""

from uuid import uuid4

import logfire

from ctfhub.domain.error import NotFoundError
from ctfhub.domain.model import Ctf
from ctfhub.domain.repository import CtfRepository
from ctfhub.domain.value import CtfId, TeamId, UserId, utcnow

from .base import Service


class CtfService(Service):
    """Domain service for a team's CTF list."""

    def __init__(self, ctf_repository: CtfRepository) -> None:
        """Initialize CTF service.

        Args:
            ctf_repository: CTF repository
        """
        self.ctf_repository = ctf_repository

    async def create_ctf(
        self,
        team_id: TeamId,
        created_by: UserId,
        name: str,
        description: str | None = None,
    ) -> Ctf:
        """Add a CTF to a team.

        Args:
            team_id: Owning team
            created_by: Member adding the CTF
            name: CTF name
            description: Optional notes

        Returns:
            Created CTF
        """
        with logfire.span("ctf_service.create_ctf", team_id=str(team_id), name=name):
            ctf = Ctf(
                id=CtfId(uuid4()),
                team_id=team_id,
                name=name,
                description=description,
                created_by=created_by,
            )
            saved = await self.ctf_repository.save(ctf)
            logfire.info("CTF created", ctf_id=str(saved.id), team_id=str(team_id))
            return saved

    async def get_for_team(self, team_id: TeamId, ctf_id: CtfId) -> Ctf:
        """Get a CTF, making sure it belongs to the team.

        Raises:
            NotFoundError: If the CTF doesn't exist or belongs to another team
        """
        with logfire.span(
            "ctf_service.get_for_team", team_id=str(team_id), ctf_id=str(ctf_id)
        ):
            ctf = await self.ctf_repository.find_by_id(ctf_id)
            if not ctf or ctf.team_id != team_id:
                logfire.warn("CTF not found", team_id=str(team_id), ctf_id=str(ctf_id))
                raise NotFoundError("CTF", str(ctf_id))
            return ctf

    async def list_for_team(
        self, team_id: TeamId, include_archived: bool = False
    ) -> list[Ctf]:
        """List a team's CTFs, oldest first."""
        with logfire.span(
            "ctf_service.list_for_team",
            team_id=str(team_id),
            include_archived=include_archived,
        ):
            ctfs = await self.ctf_repository.find_by_team(team_id, include_archived)
            logfire.info("CTFs listed", team_id=str(team_id), count=len(ctfs))
            return ctfs

    async def set_archived(self, ctf: Ctf, archived: bool) -> Ctf:
        """Archive or unarchive a CTF."""
        with logfire.span(
            "ctf_service.set_archived", ctf_id=str(ctf.id), archived=archived
        ):
            if ctf.archived == archived:
                return ctf
            updated = ctf.model_copy(
                update={"archived": archived, "updated_at": utcnow()}
            )
            saved = await self.ctf_repository.save(updated)
            logfire.info("CTF archive state changed", ctf_id=str(ctf.id), archived=archived)
            return saved

    async def delete_for_team(self, team_id: TeamId) -> int:
        """Delete every CTF of a team."""
        with logfire.span("ctf_service.delete_for_team", team_id=str(team_id)):
            count = await self.ctf_repository.delete_by_team(team_id)
            logfire.info("Team CTFs deleted", team_id=str(team_id), count=count)
            return count
