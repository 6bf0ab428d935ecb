"""Get CTF use case."""

from uuid import UUID

from pydantic import BaseModel

from ctfhub.application.usecase.base import BaseUseCase
from ctfhub.application.usecase.views import CtfView
from ctfhub.domain.service import CtfService, JWTService, TeamService
from ctfhub.domain.value import CtfId, TeamId


class GetCtfRequest(BaseModel):
    """Get CTF request."""

    token: str
    team_id: UUID
    ctf_id: UUID


class GetCtfUseCase(BaseUseCase):
    """Use case for reading one of a team's CTFs."""

    def __init__(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        ctf_service: CtfService,
    ) -> None:
        self.jwt_service = jwt_service
        self.team_service = team_service
        self.ctf_service = ctf_service

    async def execute(self, request: GetCtfRequest) -> CtfView:
        identity = self.jwt_service.authenticate(request.token)

        team = await self.team_service.get_by_id(TeamId(request.team_id))
        self.team_service.ensure_can_view(team, identity)

        ctf = await self.ctf_service.get_for_team(team.id, CtfId(request.ctf_id))
        return CtfView.from_domain(ctf)
