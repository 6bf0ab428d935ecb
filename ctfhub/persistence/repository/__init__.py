"""PostgreSQL repository implementations."""

from ctfhub.persistence.repository.ctf import PostgresCtfRepository
from ctfhub.persistence.repository.invite import PostgresInviteRepository
from ctfhub.persistence.repository.team import PostgresTeamRepository
from ctfhub.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresTeamRepository",
    "PostgresInviteRepository",
    "PostgresCtfRepository",
]
