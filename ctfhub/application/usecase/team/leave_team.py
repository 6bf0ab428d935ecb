"""Leave team use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from ctfhub.application.usecase.base import BaseUseCase
from ctfhub.domain.service import JWTService, TeamService, UserService
from ctfhub.domain.value import TeamId


class LeaveTeamRequest(BaseModel):
    """Leave team request."""

    token: str
    team_id: UUID


class LeaveTeamUseCase(BaseUseCase):
    """Use case for a member leaving a team."""

    def __init__(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        user_service: UserService,
    ) -> None:
        self.jwt_service = jwt_service
        self.team_service = team_service
        self.user_service = user_service

    async def execute(self, request: LeaveTeamRequest) -> None:
        """Remove the caller from the team.

        Raises:
            NotFoundError: If the team doesn't exist
            ConflictError: If the caller owns the team or isn't a member
        """
        identity = self.jwt_service.authenticate(request.token)

        with logfire.span(
            "leave_team", team_id=str(request.team_id), user_id=str(identity.user_id)
        ):
            team = await self.team_service.get_by_id(
                TeamId(request.team_id), for_update=True
            )
            user = await self.user_service.get_by_id(identity.user_id, for_update=True)
            await self.team_service.remove_member(team, user.id)
            await self.user_service.remove_team(user, team.id)
