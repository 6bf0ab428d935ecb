"""Shared in-memory store for testing."""

from ctfhub.domain.model import Ctf, Invite, Team, User
from ctfhub.domain.value import CtfId, InviteId, TeamId, UserId


class InMemoryDatabase:
    """Holds every record so that repositories created per request see the
    same state, the way they would share a PostgreSQL database.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.teams: dict[TeamId, Team] = {}
        self.invites: dict[InviteId, Invite] = {}
        self.ctfs: dict[CtfId, Ctf] = {}
