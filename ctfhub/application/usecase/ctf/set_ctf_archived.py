"""Archive and unarchive CTF use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from ctfhub.application.usecase.base import BaseUseCase
from ctfhub.application.usecase.views import CtfView
from ctfhub.domain.service import CtfService, JWTService, TeamService
from ctfhub.domain.value import CtfId, TeamId


class SetCtfArchivedRequest(BaseModel):
    """Archive or unarchive request."""

    token: str
    team_id: UUID
    ctf_id: UUID
    archived: bool


class SetCtfArchivedUseCase(BaseUseCase):
    """Use case for moving a CTF in or out of the team's archive."""

    def __init__(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        ctf_service: CtfService,
    ) -> None:
        """Initialize set CTF archived use case.

        Args:
            jwt_service: JWT service for token verification
            team_service: Team domain service
            ctf_service: CTF domain service
        """
        self.jwt_service = jwt_service
        self.team_service = team_service
        self.ctf_service = ctf_service

    async def execute(self, request: SetCtfArchivedRequest) -> CtfView:
        """Execute archive/unarchive flow.

        Raises:
            NotFoundError: If the team or CTF doesn't exist
            AuthorizationError: If the caller is neither owner nor admin
        """
        identity = self.jwt_service.authenticate(request.token)
        action = "archive CTFs" if request.archived else "unarchive CTFs"

        with logfire.span(
            "set_ctf_archived",
            team_id=str(request.team_id),
            ctf_id=str(request.ctf_id),
            archived=request.archived,
        ):
            team = await self.team_service.get_by_id(
                TeamId(request.team_id), for_update=True
            )
            self.team_service.ensure_owner(team, identity, action)

            ctf = await self.ctf_service.get_for_team(team.id, CtfId(request.ctf_id))
            updated = await self.ctf_service.set_archived(ctf, request.archived)
            return CtfView.from_domain(updated)
