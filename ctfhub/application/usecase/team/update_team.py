"""Update team use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from ctfhub.application.usecase.base import BaseUseCase
from ctfhub.application.usecase.views import TeamView
from ctfhub.domain.service import JWTService, TeamService
from ctfhub.domain.value import TeamId, TeamName


class UpdateTeamRequest(BaseModel):
    """Partial team update. ``None`` leaves a field unchanged."""

    token: str
    team_id: UUID
    name: str | None = None
    twitter: str | None = None
    website: str | None = None


class UpdateTeamUseCase(BaseUseCase):
    """Use case for editing a team's name and social links."""

    def __init__(self, jwt_service: JWTService, team_service: TeamService) -> None:
        """Initialize update team use case.

        Args:
            jwt_service: JWT service for token verification
            team_service: Team domain service
        """
        self.jwt_service = jwt_service
        self.team_service = team_service

    async def execute(self, request: UpdateTeamRequest) -> TeamView:
        """Execute update team flow.

        Any team member may edit the profile, as may admins.

        Args:
            request: Update team request

        Returns:
            Updated team

        Raises:
            NotFoundError: If the team doesn't exist
            AuthorizationError: If the caller may not view the team
            ConflictError: If the new name belongs to another team
        """
        identity = self.jwt_service.authenticate(request.token)
        name = TeamName(request.name) if request.name is not None else None

        with logfire.span(
            "update_team", team_id=str(request.team_id), user_id=str(identity.user_id)
        ):
            team = await self.team_service.get_by_id(
                TeamId(request.team_id), for_update=True
            )
            self.team_service.ensure_can_view(team, identity)

            updated = await self.team_service.update_details(
                team,
                name=name,
                twitter=request.twitter,
                website=request.website,
            )
            return TeamView.from_domain(updated)
