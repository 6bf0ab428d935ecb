"""Domain value objects."""

from ctfhub.domain.value.common import utcnow
from ctfhub.domain.value.identifiers import (
    CtfId,
    InviteId,
    TeamId,
    UserId,
)
from ctfhub.domain.value.types import (
    Identity,
    InviteCode,
    TeamName,
    TeamSocials,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "TeamId",
    "InviteId",
    "CtfId",
    # Types
    "Identity",
    "InviteCode",
    "TeamName",
    "TeamSocials",
    "Username",
    # Helpers
    "utcnow",
]
