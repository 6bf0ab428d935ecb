"""Delete team use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from ctfhub.application.usecase.base import BaseUseCase
from ctfhub.domain.service import (
    CtfService,
    InviteService,
    JWTService,
    TeamService,
    UserService,
)
from ctfhub.domain.value import TeamId


class DeleteTeamRequest(BaseModel):
    """Delete team request."""

    token: str
    team_id: UUID


class DeleteTeamUseCase(BaseUseCase):
    """Use case for deleting a team and everything that hangs off it."""

    def __init__(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        user_service: UserService,
        invite_service: InviteService,
        ctf_service: CtfService,
    ) -> None:
        """Initialize delete team use case.

        Args:
            jwt_service: JWT service for token verification
            team_service: Team domain service
            user_service: User domain service
            invite_service: Invite domain service
            ctf_service: CTF domain service
        """
        self.jwt_service = jwt_service
        self.team_service = team_service
        self.user_service = user_service
        self.invite_service = invite_service
        self.ctf_service = ctf_service

    async def execute(self, request: DeleteTeamRequest) -> None:
        """Execute delete team flow.

        Every member, owner included, loses the team from their memberships.
        The team's invites and CTFs are deleted with it.

        Rows are locked team first, then its invites, then its members in
        ID order, the same order invite redemption uses.

        Args:
            request: Delete team request

        Raises:
            NotFoundError: If the team doesn't exist
            AuthorizationError: If the caller is neither owner nor admin
        """
        identity = self.jwt_service.authenticate(request.token)

        with logfire.span(
            "delete_team", team_id=str(request.team_id), user_id=str(identity.user_id)
        ):
            team = await self.team_service.get_by_id(
                TeamId(request.team_id), for_update=True
            )
            self.team_service.ensure_owner(team, identity, "delete the team")

            await self.invite_service.delete_for_team(team.id)

            members = await self.user_service.get_many(
                team.all_member_ids, for_update=True
            )
            for member in members:
                await self.user_service.remove_team(member, team.id)

            await self.ctf_service.delete_for_team(team.id)
            await self.team_service.delete_team(team)

            logfire.info(
                "Team and dependents deleted",
                team_id=str(team.id),
                member_count=len(members),
            )
