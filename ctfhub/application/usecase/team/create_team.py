"""Create team use case."""

import logfire
from pydantic import BaseModel, Field

from ctfhub.application.usecase.base import ApiModel, BaseUseCase
from ctfhub.domain.service import JWTService, TeamService, UserService
from ctfhub.domain.value import TeamName


class CreateTeamRequest(BaseModel):
    """Create team request."""

    token: str
    team_name: str


class CreateTeamResponse(ApiModel):
    """Create team response."""

    team_name: str
    team_id: str = Field(alias="teamID")


class CreateTeamUseCase(BaseUseCase):
    """Use case for creating a team owned by the caller."""

    def __init__(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        user_service: UserService,
    ) -> None:
        """Initialize create team use case.

        Args:
            jwt_service: JWT service for token verification
            team_service: Team domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.team_service = team_service
        self.user_service = user_service

    async def execute(self, request: CreateTeamRequest) -> CreateTeamResponse:
        """Execute create team flow.

        Args:
            request: Token and requested team name

        Returns:
            Normalized team name and new team ID

        Raises:
            InvalidTokenError: If the token is invalid
            NotFoundError: If the caller's user record doesn't exist
            ConflictError: If the name is taken
        """
        identity = self.jwt_service.authenticate(request.token)
        name = TeamName(request.team_name)

        with logfire.span(
            "create_team", user_id=str(identity.user_id), name=name.root
        ):
            owner = await self.user_service.get_by_id(identity.user_id, for_update=True)
            team = await self.team_service.create_team(owner.id, name)
            await self.user_service.add_team(owner, team.id)

            return CreateTeamResponse(team_name=team.name.root, team_id=str(team.id))
