"""Get invite use case."""

import logfire
from pydantic import BaseModel

from ctfhub.application.usecase.base import BaseUseCase
from ctfhub.application.usecase.views import (
    InviteBasicView,
    InviteView,
    basic_invite_view,
)
from ctfhub.domain.service import InviteService, JWTService, TeamService


class GetInviteRequest(BaseModel):
    """Get invite request. The token is optional."""

    token: str | None = None
    code: str


class GetInviteUseCase(BaseUseCase):
    """Use case for looking up an invite before redeeming it."""

    def __init__(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        invite_service: InviteService,
    ) -> None:
        """Initialize get invite use case.

        Args:
            jwt_service: JWT service for token verification
            team_service: Team domain service
            invite_service: Invite domain service
        """
        self.jwt_service = jwt_service
        self.team_service = team_service
        self.invite_service = invite_service

    async def execute(self, request: GetInviteRequest) -> InviteView | InviteBasicView:
        """Execute get invite flow.

        Admins see the full invite, even once it has expired. Everyone else
        (anonymous callers included) sees the basic view of a usable invite.

        Args:
            request: Invite code and optional token

        Returns:
            Full view for admins, basic view otherwise

        Raises:
            InvalidTokenError: If a token is supplied but invalid
            NotFoundError: If no invite has this code
            InviteExpiredError: If a non-admin looks up an unusable invite
        """
        identity = self.jwt_service.authenticate_optional(request.token)
        is_admin = identity is not None and identity.is_admin

        with logfire.span("get_invite", code=request.code, is_admin=is_admin):
            invite = await self.invite_service.get_by_code(request.code)
            if not is_admin:
                self.invite_service.ensure_usable(invite)

            team = await self.team_service.get_by_id(invite.team_id)

            if is_admin:
                return InviteView.from_domain(invite, team.name.root)
            return basic_invite_view(invite, team.name.root)
