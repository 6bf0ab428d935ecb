"""Get team use case."""

from uuid import UUID

from pydantic import BaseModel

from ctfhub.application.usecase.base import BaseUseCase
from ctfhub.application.usecase.views import TeamView
from ctfhub.domain.service import JWTService, TeamService
from ctfhub.domain.value import TeamId


class GetTeamRequest(BaseModel):
    """Get team request."""

    token: str
    team_id: UUID


class GetTeamUseCase(BaseUseCase):
    """Use case for reading a team as a member or admin."""

    def __init__(self, jwt_service: JWTService, team_service: TeamService) -> None:
        self.jwt_service = jwt_service
        self.team_service = team_service

    async def execute(self, request: GetTeamRequest) -> TeamView:
        """Return the team if the caller is an admin or in the team.

        Raises:
            NotFoundError: If the team doesn't exist
            AuthorizationError: If the caller may not view it
        """
        identity = self.jwt_service.authenticate(request.token)

        team = await self.team_service.get_by_id(TeamId(request.team_id))
        self.team_service.ensure_can_view(team, identity)

        return TeamView.from_domain(team)
