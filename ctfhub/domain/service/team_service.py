"""Team domain service.

Holds the team authorization policy: who may see a team, who may act as
its owner, and how membership and ownership change.
"""

from uuid import uuid4

import logfire

from ctfhub.domain.error import (
    AuthorizationError,
    ConflictError,
    InvalidOwnershipTransferError,
    NotFoundError,
)
from ctfhub.domain.model import Team
from ctfhub.domain.repository import TeamRepository
from ctfhub.domain.value import (
    Identity,
    InviteId,
    TeamId,
    TeamName,
    TeamSocials,
    UserId,
    utcnow,
)

from .base import Service


class TeamService(Service):
    """Domain service for team lifecycle and authorization."""

    def __init__(self, team_repository: TeamRepository) -> None:
        """Initialize team service.

        Args:
            team_repository: Team repository
        """
        self.team_repository = team_repository

    async def get_by_id(self, team_id: TeamId, for_update: bool = False) -> Team:
        """Get a team by ID.

        Args:
            team_id: Team ID
            for_update: Lock the record for the rest of the transaction

        Returns:
            Team entity

        Raises:
            NotFoundError: If team not found
        """
        with logfire.span("team_service.get_by_id", team_id=str(team_id)):
            team = await self.team_repository.find_by_id(team_id, for_update=for_update)
            if not team:
                logfire.warn("Team not found", team_id=str(team_id))
                raise NotFoundError("Team", str(team_id))
            return team

    def ensure_can_view(self, team: Team, identity: Identity) -> None:
        """Allow admins and team members (owner included).

        Raises:
            AuthorizationError: If the caller is neither
        """
        if identity.is_admin or team.in_team(identity.user_id):
            return
        logfire.warn(
            "Caller is not in team",
            team_id=str(team.id),
            user_id=str(identity.user_id),
        )
        raise AuthorizationError("You are not a member of this team")

    def ensure_owner(self, team: Team, identity: Identity, action: str) -> None:
        """Allow admins and the team owner.

        Args:
            team: Team acted on
            identity: Caller
            action: What the caller tried to do, for the error message

        Raises:
            AuthorizationError: If the caller is neither
        """
        if identity.is_admin or team.is_owner(identity.user_id):
            return
        logfire.warn(
            "Caller is not team owner",
            team_id=str(team.id),
            user_id=str(identity.user_id),
            action=action,
        )
        raise AuthorizationError(f"Only the team owner can {action}")

    async def create_team(self, owner_id: UserId, name: TeamName) -> Team:
        """Create a team owned by the given user.

        Args:
            owner_id: Owner of the new team
            name: Team name (already normalized)

        Returns:
            Created team

        Raises:
            ConflictError: If a team with the same name exists
        """
        with logfire.span(
            "team_service.create_team", owner_id=str(owner_id), name=name.root
        ):
            await self._ensure_name_available(name)

            team = Team(id=TeamId(uuid4()), name=name, owner_id=owner_id)
            saved = await self.team_repository.save(team)
            logfire.info("Team created", team_id=str(saved.id), name=name.root)
            return saved

    async def update_details(
        self,
        team: Team,
        name: TeamName | None = None,
        twitter: str | None = None,
        website: str | None = None,
    ) -> Team:
        """Apply a partial update of the team's profile.

        Args:
            team: Team to update
            name: New name
            twitter: New Twitter link
            website: New website link

        Returns:
            Saved team

        Raises:
            ConflictError: If the new name belongs to another team
        """
        with logfire.span("team_service.update_details", team_id=str(team.id)):
            if name is not None and name != team.name:
                await self._ensure_name_available(name)

            socials = TeamSocials(
                twitter=twitter if twitter is not None else team.socials.twitter,
                website=website if website is not None else team.socials.website,
            )
            updated = team.model_copy(
                update={
                    "name": name if name is not None else team.name,
                    "socials": socials,
                    "updated_at": utcnow(),
                }
            )
            saved = await self.team_repository.save(updated)
            logfire.info("Team details updated", team_id=str(team.id))
            return saved

    async def transfer_ownership(
        self, team: Team, identity: Identity, new_owner_id: UserId
    ) -> Team:
        """Hand the team over to another user.

        Non-admin transfers must come from the current owner and target an
        existing member. The previous owner stays in the team as a member.

        Args:
            team: Team to update
            identity: Caller
            new_owner_id: Future owner

        Returns:
            Saved team

        Raises:
            InvalidOwnershipTransferError: If the transfer is not allowed
        """
        with logfire.span(
            "team_service.transfer_ownership",
            team_id=str(team.id),
            new_owner_id=str(new_owner_id),
        ):
            if not identity.is_admin:
                if not team.in_team(new_owner_id):
                    logfire.info("New owner not in team", team_id=str(team.id))
                    raise InvalidOwnershipTransferError(
                        "New owner must be in team before transfer of ownership",
                        error_code="error_new_owner_not_in_team",
                    )
                if not team.is_owner(identity.user_id):
                    logfire.info(
                        "Cannot transfer ownership away from user that isn't owner",
                        team_id=str(team.id),
                    )
                    raise InvalidOwnershipTransferError(
                        "Cannot transfer ownership",
                        error_code="error_user_not_owner",
                    )

            if team.is_owner(new_owner_id):
                return team

            members = [m for m in team.member_ids if m != new_owner_id]
            members.append(team.owner_id)
            updated = team.model_copy(
                update={
                    "owner_id": new_owner_id,
                    "member_ids": members,
                    "updated_at": utcnow(),
                }
            )
            saved = await self.team_repository.save(updated)
            logfire.info(
                "Team ownership transferred",
                team_id=str(team.id),
                old_owner_id=str(team.owner_id),
                new_owner_id=str(new_owner_id),
            )
            return saved

    def ensure_can_join(self, team: Team, user_id: UserId) -> None:
        """Reject users who are already in the team (owner included).

        Raises:
            ConflictError: If the user is already in the team
        """
        if team.in_team(user_id):
            logfire.info(
                "User already in team", team_id=str(team.id), user_id=str(user_id)
            )
            raise ConflictError(
                "User is already in team", error_code="error_already_in_team"
            )

    async def add_member(self, team: Team, user_id: UserId) -> Team:
        """Add a user to the team's members.

        Raises:
            ConflictError: If the user is already in the team
        """
        with logfire.span(
            "team_service.add_member", team_id=str(team.id), user_id=str(user_id)
        ):
            self.ensure_can_join(team, user_id)
            updated = team.model_copy(
                update={"member_ids": [*team.member_ids, user_id], "updated_at": utcnow()}
            )
            saved = await self.team_repository.save(updated)
            logfire.info("Member added", team_id=str(team.id), user_id=str(user_id))
            return saved

    async def remove_member(self, team: Team, user_id: UserId) -> Team:
        """Remove a member from the team.

        Raises:
            ConflictError: If the user is the owner or not a member
        """
        with logfire.span(
            "team_service.remove_member", team_id=str(team.id), user_id=str(user_id)
        ):
            if team.is_owner(user_id):
                logfire.info("Owner of team cannot leave", team_id=str(team.id))
                raise ConflictError(
                    "Owner may not leave team",
                    error_code="error_owner_cannot_leave",
                    details=(
                        "The owner of a team cannot leave it without first "
                        "changing the owner to a different member"
                    ),
                )
            if user_id not in team.member_ids:
                logfire.info("User is not in team", team_id=str(team.id))
                raise ConflictError(
                    "Cannot leave team", error_code="error_not_in_team"
                )

            updated = team.model_copy(
                update={
                    "member_ids": [m for m in team.member_ids if m != user_id],
                    "updated_at": utcnow(),
                }
            )
            saved = await self.team_repository.save(updated)
            logfire.info("Member removed", team_id=str(team.id), user_id=str(user_id))
            return saved

    async def add_invite(self, team: Team, invite_id: InviteId) -> Team:
        """Link an invite to the team."""
        updated = team.model_copy(update={"invite_ids": [*team.invite_ids, invite_id]})
        return await self.team_repository.save(updated)

    async def remove_invite(self, team: Team, invite_id: InviteId) -> Team:
        """Unlink an invite from the team."""
        updated = team.model_copy(
            update={"invite_ids": [i for i in team.invite_ids if i != invite_id]}
        )
        return await self.team_repository.save(updated)

    async def delete_team(self, team: Team) -> None:
        """Delete the team record.

        Memberships, invites and CTFs are cleaned up by the caller.
        """
        with logfire.span("team_service.delete_team", team_id=str(team.id)):
            await self.team_repository.delete(team.id)
            logfire.info("Team deleted", team_id=str(team.id), name=team.name.root)

    async def _ensure_name_available(self, name: TeamName) -> None:
        if await self.team_repository.exists_by_name(name):
            logfire.info("Team already exists", name=name.root)
            raise ConflictError(
                f"Team {name.root} already exists", error_code="error_team_exists"
            )
