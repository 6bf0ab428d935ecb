"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from ctfhub.domain.repository.ctf import CtfRepository
from ctfhub.domain.repository.invite import InviteRepository
from ctfhub.domain.repository.team import TeamRepository
from ctfhub.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "TeamRepository",
    "InviteRepository",
    "CtfRepository",
]
