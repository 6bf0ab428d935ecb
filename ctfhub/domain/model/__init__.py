"""Domain model entities."""

from ctfhub.domain.model.ctf import Ctf
from ctfhub.domain.model.invite import Invite
from ctfhub.domain.model.team import Team
from ctfhub.domain.model.user import User

__all__ = [
    "User",
    "Team",
    "Invite",
    "Ctf",
]
