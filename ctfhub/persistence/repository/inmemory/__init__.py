"""In-memory repository implementations for testing."""

from .ctf import InMemoryCtfRepository
from .database import InMemoryDatabase
from .invite import InMemoryInviteRepository
from .team import InMemoryTeamRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCtfRepository",
    "InMemoryDatabase",
    "InMemoryInviteRepository",
    "InMemoryTeamRepository",
    "InMemoryUserRepository",
]
