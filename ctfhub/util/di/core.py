"""Core DI providers (non-mockable)."""

import logfire
from dishka import Scope, provide

from ctfhub.config import DEFAULT_JWT_SECRET, AuthSettings, InviteSettings, Settings
from ctfhub.util.di.base import ProviderBase
from ctfhub.util.error import ConfigurationError


def check_settings(settings: Settings) -> Settings:
    """Refuse settings the service cannot safely run with.

    Raises:
        ConfigurationError: If production runs with the placeholder secret
    """
    if (
        settings.environment == "production"
        and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
    ):
        logfire.error("JWT secret not configured for production")
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")
    return settings


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide checked application settings from environment."""
        return check_settings(Settings())

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_invite_settings(self, settings: Settings) -> InviteSettings:
        """Provide invite settings."""
        return settings.invites
