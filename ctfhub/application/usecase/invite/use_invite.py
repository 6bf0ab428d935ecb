"""Use (redeem) invite use case."""

import logfire
from pydantic import BaseModel

from ctfhub.application.usecase.base import BaseUseCase
from ctfhub.application.usecase.views import TeamView
from ctfhub.domain.service import (
    InviteService,
    JWTService,
    TeamService,
    UserService,
)


class UseInviteRequest(BaseModel):
    """Use invite request."""

    token: str
    code: str


class UseInviteUseCase(BaseUseCase):
    """Use case for joining a team through an invite code."""

    def __init__(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        user_service: UserService,
        invite_service: InviteService,
    ) -> None:
        """Initialize use invite use case.

        Args:
            jwt_service: JWT service for token verification
            team_service: Team domain service
            user_service: User domain service
            invite_service: Invite domain service
        """
        self.jwt_service = jwt_service
        self.team_service = team_service
        self.user_service = user_service
        self.invite_service = invite_service

    async def execute(self, request: UseInviteRequest) -> TeamView:
        """Execute invite redemption.

        Locks are taken team first, then invite, then user. The invite is
        looked up unlocked only to learn its team, then read again under the
        lock, so two concurrent redemptions of the last remaining use
        serialize and the second one sees the invite as exhausted. Every
        check runs before the first write.

        Args:
            request: Invite code and the caller's token

        Returns:
            The team the caller joined

        Raises:
            NotFoundError: If no invite has this code
            InviteExpiredError: If the invite is expired or out of uses
            ConflictError: If the caller is already in the team
        """
        identity = self.jwt_service.authenticate(request.token)

        with logfire.span(
            "use_invite", code=request.code, user_id=str(identity.user_id)
        ):
            invite = await self.invite_service.get_by_code(request.code)
            self.invite_service.ensure_usable(invite)

            team = await self.team_service.get_by_id(invite.team_id, for_update=True)
            invite = await self.invite_service.get_by_code(
                request.code, for_update=True
            )
            self.invite_service.ensure_usable(invite)

            user = await self.user_service.get_by_id(identity.user_id, for_update=True)
            self.team_service.ensure_can_join(team, user.id)
            self.invite_service.ensure_redeemable(invite, user.id)

            updated_team = await self.team_service.add_member(team, user.id)
            await self.user_service.add_team(user, team.id)
            await self.invite_service.record_use(invite, user.id)

            logfire.info(
                "Invite redeemed",
                team_id=str(team.id),
                user_id=str(user.id),
                invite_id=str(invite.id),
            )
            return TeamView.from_domain(updated_team)
