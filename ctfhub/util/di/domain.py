"""Domain layer DI providers."""

from dishka import Scope, provide

from ctfhub.config import AuthSettings, InviteSettings
from ctfhub.domain.repository import (
    CtfRepository,
    InviteRepository,
    TeamRepository,
    UserRepository,
)
from ctfhub.domain.service import (
    CtfService,
    InviteService,
    JWTService,
    TeamService,
    UserService,
)
from ctfhub.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_team_service(self, team_repository: TeamRepository) -> TeamService:
        """Provide team domain service."""
        return TeamService(team_repository=team_repository)

    @provide
    def get_invite_service(
        self, invite_repository: InviteRepository, invite_settings: InviteSettings
    ) -> InviteService:
        """Provide invite domain service."""
        return InviteService(
            invite_repository=invite_repository, invite_settings=invite_settings
        )

    @provide
    def get_ctf_service(self, ctf_repository: CtfRepository) -> CtfService:
        """Provide CTF domain service."""
        return CtfService(ctf_repository=ctf_repository)
