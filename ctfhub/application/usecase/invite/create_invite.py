"""Create invite use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from ctfhub.application.usecase.base import BaseUseCase
from ctfhub.application.usecase.views import InviteView
from ctfhub.domain.service import InviteService, JWTService, TeamService
from ctfhub.domain.value import TeamId


class CreateInviteRequest(BaseModel):
    """Create invite request."""

    token: str
    team_id: UUID
    expiry: datetime | None = None
    max_uses: int | None = None


class CreateInviteUseCase(BaseUseCase):
    """Use case for creating an invite code for a team."""

    def __init__(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        invite_service: InviteService,
    ) -> None:
        """Initialize create invite use case.

        Args:
            jwt_service: JWT service for token verification
            team_service: Team domain service
            invite_service: Invite domain service
        """
        self.jwt_service = jwt_service
        self.team_service = team_service
        self.invite_service = invite_service

    async def execute(self, request: CreateInviteRequest) -> InviteView:
        """Execute create invite flow.

        Args:
            request: Team ID plus optional expiry and use limit

        Returns:
            Created invite

        Raises:
            NotFoundError: If the team doesn't exist
            AuthorizationError: If the caller is neither owner nor admin
            ValidationError: If expiry is in the past or max_uses < 1
        """
        identity = self.jwt_service.authenticate(request.token)

        with logfire.span(
            "create_invite",
            team_id=str(request.team_id),
            user_id=str(identity.user_id),
        ):
            team = await self.team_service.get_by_id(
                TeamId(request.team_id), for_update=True
            )
            self.team_service.ensure_owner(team, identity, "create invites")

            invite = await self.invite_service.create_invite(
                team_id=team.id,
                created_by=identity.user_id,
                expiry=request.expiry,
                max_uses=request.max_uses,
            )
            await self.team_service.add_invite(team, invite.id)

            return InviteView.from_domain(invite, team.name.root)
