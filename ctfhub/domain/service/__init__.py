"""Domain services."""

from .base import Service
from .ctf_service import CtfService
from .invite_service import InviteService
from .jwt_service import JWTService
from .team_service import TeamService
from .user_service import UserService

__all__ = [
    "CtfService",
    "InviteService",
    "JWTService",
    "Service",
    "TeamService",
    "UserService",
]
