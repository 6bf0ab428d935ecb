"""Transfer team ownership use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from ctfhub.application.usecase.base import BaseUseCase
from ctfhub.application.usecase.views import TeamView
from ctfhub.domain.service import JWTService, TeamService, UserService
from ctfhub.domain.value import TeamId, UserId


class UpdateOwnerRequest(BaseModel):
    """Update owner request."""

    token: str
    team_id: UUID
    new_owner_id: UUID


class UpdateOwnerUseCase(BaseUseCase):
    """Use case for handing a team over to another user."""

    def __init__(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        user_service: UserService,
    ) -> None:
        """Initialize update owner use case.

        Args:
            jwt_service: JWT service for token verification
            team_service: Team domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.team_service = team_service
        self.user_service = user_service

    async def execute(self, request: UpdateOwnerRequest) -> TeamView:
        """Execute ownership transfer.

        Args:
            request: Team ID and the ID of the future owner

        Returns:
            Updated team

        Raises:
            NotFoundError: If the team or the candidate doesn't exist
            AuthorizationError: If the caller may not view the team
            InvalidOwnershipTransferError: If a non-admin transfer is not
                from the owner or not to an existing member
        """
        identity = self.jwt_service.authenticate(request.token)
        new_owner_id = UserId(request.new_owner_id)

        with logfire.span(
            "update_owner",
            team_id=str(request.team_id),
            user_id=str(identity.user_id),
            new_owner_id=str(new_owner_id),
        ):
            team = await self.team_service.get_by_id(
                TeamId(request.team_id), for_update=True
            )
            self.team_service.ensure_can_view(team, identity)
            candidate = await self.user_service.get_by_id(new_owner_id, for_update=True)

            updated = await self.team_service.transfer_ownership(
                team, identity, candidate.id
            )

            # Admin transfers may hand the team to someone outside it
            if team.id not in candidate.team_ids:
                await self.user_service.add_team(candidate, team.id)

            return TeamView.from_domain(updated)
