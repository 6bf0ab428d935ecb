"""Create CTF use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from ctfhub.application.usecase.base import BaseUseCase
from ctfhub.application.usecase.views import CtfView
from ctfhub.domain.service import CtfService, JWTService, TeamService
from ctfhub.domain.value import TeamId


class CreateCtfRequest(BaseModel):
    """Create CTF request."""

    token: str
    team_id: UUID
    name: str
    description: str | None = None


class CreateCtfUseCase(BaseUseCase):
    """Use case for adding a CTF to a team's list."""

    def __init__(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        ctf_service: CtfService,
    ) -> None:
        """Initialize create CTF use case.

        Args:
            jwt_service: JWT service for token verification
            team_service: Team domain service
            ctf_service: CTF domain service
        """
        self.jwt_service = jwt_service
        self.team_service = team_service
        self.ctf_service = ctf_service

    async def execute(self, request: CreateCtfRequest) -> CtfView:
        """Execute create CTF flow.

        Raises:
            NotFoundError: If the team doesn't exist
            AuthorizationError: If the caller is neither member nor admin
        """
        identity = self.jwt_service.authenticate(request.token)

        with logfire.span(
            "create_ctf", team_id=str(request.team_id), user_id=str(identity.user_id)
        ):
            team = await self.team_service.get_by_id(
                TeamId(request.team_id), for_update=True
            )
            self.team_service.ensure_can_view(team, identity)

            ctf = await self.ctf_service.create_ctf(
                team_id=team.id,
                created_by=identity.user_id,
                name=request.name,
                description=request.description,
            )
            return CtfView.from_domain(ctf)
