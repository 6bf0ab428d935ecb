"""List CTFs use case."""

from uuid import UUID

from pydantic import BaseModel

from ctfhub.application.usecase.base import BaseUseCase
from ctfhub.application.usecase.views import CtfView
from ctfhub.domain.service import CtfService, JWTService, TeamService
from ctfhub.domain.value import TeamId


class ListCtfsRequest(BaseModel):
    """List CTFs request."""

    token: str
    team_id: UUID
    include_archived: bool = False


class ListCtfsUseCase(BaseUseCase):
    """Use case for listing a team's CTFs."""

    def __init__(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        ctf_service: CtfService,
    ) -> None:
        self.jwt_service = jwt_service
        self.team_service = team_service
        self.ctf_service = ctf_service

    async def execute(self, request: ListCtfsRequest) -> list[CtfView]:
        """List the team's CTFs, oldest first, archived ones on request."""
        identity = self.jwt_service.authenticate(request.token)

        team = await self.team_service.get_by_id(TeamId(request.team_id))
        self.team_service.ensure_can_view(team, identity)

        ctfs = await self.ctf_service.list_for_team(
            team.id, include_archived=request.include_archived
        )
        return [CtfView.from_domain(ctf) for ctf in ctfs]
