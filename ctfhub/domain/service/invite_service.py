"""Invite domain service."""

import secrets
from datetime import datetime
from uuid import uuid4

import logfire

from ctfhub.config import InviteSettings
from ctfhub.domain.error import (
    ConflictError,
    InviteExpiredError,
    NotFoundError,
    ValidationError,
)
from ctfhub.domain.model.common import ensure_utc
from ctfhub.domain.model.invite import Invite
from ctfhub.domain.repository import InviteRepository
from ctfhub.domain.value import InviteCode, InviteId, TeamId, UserId, utcnow

from .base import Service


class InviteService(Service):
    """Domain service for team invite lifecycle."""

    def __init__(
        self, invite_repository: InviteRepository, invite_settings: InviteSettings
    ) -> None:
        """Initialize invite service.

        Args:
            invite_repository: Invite repository
            invite_settings: Invite code configuration
        """
        self.invite_repository = invite_repository
        self.invite_settings = invite_settings

    async def create_invite(
        self,
        team_id: TeamId,
        created_by: UserId,
        expiry: datetime | None = None,
        max_uses: int | None = None,
    ) -> Invite:
        """Create a new invite for a team.

        Args:
            team_id: Team the invite grants membership of
            created_by: User creating the invite
            expiry: Optional time after which the invite is invalid
            max_uses: Optional number of times the invite can be redeemed

        Returns:
            Created invite

        Raises:
            ValidationError: If expiry is in the past or max_uses < 1
            ConflictError: If no free invite code could be generated
        """
        with logfire.span(
            "invite_service.create_invite",
            team_id=str(team_id),
            created_by=str(created_by),
            max_uses=max_uses,
        ):
            expiry = ensure_utc(expiry)
            if expiry is not None and expiry <= utcnow():
                raise ValidationError("Invite expiry must be in the future")
            if max_uses is not None and max_uses < 1:
                raise ValidationError("Invite max uses must be at least 1")

            invite = Invite(
                id=InviteId(uuid4()),
                code=await self._generate_code(),
                team_id=team_id,
                created_by=created_by,
                created_at=utcnow(),
                expiry=expiry,
                max_uses=max_uses,
            )

            saved = await self.invite_repository.save(invite)
            logfire.info(
                "Invite created",
                invite_id=str(saved.id),
                team_id=str(team_id),
                expiry=expiry,
                max_uses=max_uses,
            )
            return saved

    async def get_by_code(self, code: str, for_update: bool = False) -> Invite:
        """Get invite by code.

        A malformed code cannot match any invite, so it is reported as not
        found rather than as a validation error.

        Args:
            code: Invite code as received from the caller
            for_update: Lock the record for the rest of the transaction

        Returns:
            Invite entity

        Raises:
            NotFoundError: If no invite has this code
        """
        with logfire.span("invite_service.get_by_code", code=code):
            try:
                invite_code = InviteCode(code)
            except ValueError:
                logfire.warn("Malformed invite code", code=code)
                raise NotFoundError("Invite", code)

            invite = await self.invite_repository.find_by_code(
                invite_code, for_update=for_update
            )
            if not invite:
                logfire.warn("Invite not found", code=code)
                raise NotFoundError("Invite", code)
            logfire.info(
                "Invite found",
                invite_id=str(invite.id),
                uses=len(invite.uses),
                max_uses=invite.max_uses,
            )
            return invite

    def ensure_usable(self, invite: Invite) -> None:
        """Reject invites that are expired or out of uses.

        Raises:
            InviteExpiredError: If the invite can no longer be redeemed
        """
        if not invite.is_usable(utcnow()):
            logfire.info(
                "Invite is expired",
                invite_id=str(invite.id),
                expired=invite.is_expired(),
                exhausted=invite.is_exhausted(),
            )
            raise InviteExpiredError(invite.code.root)

    def ensure_redeemable(self, invite: Invite, user_id: UserId) -> None:
        """Reject a redemption before anything is written.

        Raises:
            InviteExpiredError: If the invite can no longer be redeemed
            ConflictError: If the user already redeemed it
        """
        self.ensure_usable(invite)
        if user_id in invite.uses:
            logfire.info(
                "Invite already used by user",
                invite_id=str(invite.id),
                user_id=str(user_id),
            )
            raise ConflictError(
                "Invite already used by this user",
                error_code="error_invite_already_used",
            )

    async def record_use(self, invite: Invite, user_id: UserId) -> Invite:
        """Record a redemption of the invite.

        Expiry and the use limit are checked again here so that an invite can
        never be redeemed more than ``max_uses`` times.

        Args:
            invite: Invite being redeemed
            user_id: Redeeming user

        Returns:
            Saved invite

        Raises:
            InviteExpiredError: If the invite can no longer be redeemed
            ConflictError: If the user already redeemed it
        """
        with logfire.span(
            "invite_service.record_use",
            invite_id=str(invite.id),
            user_id=str(user_id),
        ):
            self.ensure_redeemable(invite, user_id)

            updated = invite.model_copy(update={"uses": [*invite.uses, user_id]})
            saved = await self.invite_repository.save(updated)
            logfire.info(
                "Invite used",
                invite_id=str(invite.id),
                uses=len(saved.uses),
                max_uses=saved.max_uses,
            )
            return saved

    async def delete_invite(self, invite: Invite) -> None:
        """Delete an invite."""
        with logfire.span("invite_service.delete_invite", invite_id=str(invite.id)):
            await self.invite_repository.delete(invite.id)
            logfire.info("Invite deleted", invite_id=str(invite.id))

    async def delete_for_team(self, team_id: TeamId) -> int:
        """Delete every invite of a team.

        Returns:
            Number of invites deleted
        """
        with logfire.span("invite_service.delete_for_team", team_id=str(team_id)):
            count = await self.invite_repository.delete_by_team(team_id)
            logfire.info("Team invites deleted", team_id=str(team_id), count=count)
            return count

    async def _generate_code(self) -> InviteCode:
        """Generate an unused random invite code.

        Raises:
            ConflictError: If every attempt collided with an existing code
        """
        for _ in range(self.invite_settings.code_attempts):
            code = InviteCode(secrets.token_hex(self.invite_settings.code_bytes))
            if not await self.invite_repository.exists_by_code(code):
                return code
            logfire.warn("Invite code collision", code=code.root)
        raise ConflictError(
            "Could not generate a unique invite code",
            error_code="error_invite_code_unavailable",
        )
