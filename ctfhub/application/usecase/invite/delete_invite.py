"""Delete invite use case."""

import logfire
from pydantic import BaseModel

from ctfhub.application.usecase.base import BaseUseCase
from ctfhub.domain.service import InviteService, JWTService, TeamService


class DeleteInviteRequest(BaseModel):
    """Delete invite request."""

    token: str
    code: str


class DeleteInviteUseCase(BaseUseCase):
    """Use case for revoking an invite."""

    def __init__(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        invite_service: InviteService,
    ) -> None:
        self.jwt_service = jwt_service
        self.team_service = team_service
        self.invite_service = invite_service

    async def execute(self, request: DeleteInviteRequest) -> None:
        """Delete the invite if the caller owns its team or is an admin.

        Raises:
            NotFoundError: If no invite has this code
            AuthorizationError: If the caller is neither owner nor admin
        """
        identity = self.jwt_service.authenticate(request.token)

        with logfire.span(
            "delete_invite", code=request.code, user_id=str(identity.user_id)
        ):
            invite = await self.invite_service.get_by_code(request.code)
            team = await self.team_service.get_by_id(invite.team_id, for_update=True)
            self.team_service.ensure_owner(team, identity, "delete invites")
            # Team before invite, as everywhere else
            invite = await self.invite_service.get_by_code(
                request.code, for_update=True
            )

            await self.team_service.remove_invite(team, invite.id)
            await self.invite_service.delete_invite(invite)
