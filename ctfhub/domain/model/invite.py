"""Invite entity.

Invites grant membership of a team to whoever redeems their code, bounded
by an optional expiry time and an optional number of uses.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from ctfhub.domain.model.common import DomainModel, ensure_utc
from ctfhub.domain.value import InviteCode, InviteId, TeamId, UserId, utcnow


class Invite(DomainModel):
    """Team invite.

    Business rules:
    - ``uses`` never grows beyond ``max_uses``
    - A user appears in ``uses`` at most once
    - Expired or exhausted invites are only visible to admins
    """

    id: InviteId
    code: InviteCode
    team_id: TeamId
    created_by: UserId
    created_at: datetime = Field(default_factory=utcnow)
    expiry: Optional[datetime] = None
    max_uses: Optional[int] = Field(default=None, ge=1)
    uses: list[UserId] = Field(default_factory=list)

    @field_validator("created_at", "expiry")
    @classmethod
    def normalize_timezone(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v)

    def is_expired(self, now: datetime | None = None) -> bool:
        """Whether the invite is past its expiry time."""
        if self.expiry is None:
            return False
        return (now or utcnow()) >= self.expiry

    def is_exhausted(self) -> bool:
        """Whether every allowed use has been consumed."""
        return self.max_uses is not None and len(self.uses) >= self.max_uses

    def is_usable(self, now: datetime | None = None) -> bool:
        return not self.is_expired(now) and not self.is_exhausted()
