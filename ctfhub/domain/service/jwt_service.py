"""JWT token domain service."""

from uuid import UUID

import logfire

from ctfhub.config import AuthSettings
from ctfhub.domain.error import InvalidTokenError
from ctfhub.domain.value import Identity, UserId
from ctfhub.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId, is_admin: bool = False) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            is_admin: Whether the token grants admin rights

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=str(user_id)):
            token = create_token(str(user_id), is_admin, self.auth_settings)
            logfire.info("JWT token created", user_id=str(user_id), is_admin=is_admin)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def authenticate(self, token: str) -> Identity:
        """Resolve a bearer token into the caller's identity.

        Args:
            token: JWT token string

        Returns:
            Verified identity (user ID and admin flag)

        Raises:
            InvalidTokenError: If the token is invalid, expired, or its
                ``id`` claim is not a UUID
        """
        try:
            payload = self.verify_token(token)
        except JWTError as e:
            raise InvalidTokenError(str(e))

        try:
            user_id = UserId(UUID(payload.id))
        except ValueError:
            raise InvalidTokenError("Token subject is not a valid user ID")

        return Identity(user_id=user_id, is_admin=payload.is_admin)

    def authenticate_optional(self, token: str | None) -> Identity | None:
        """Resolve an optional bearer token.

        A missing token means an anonymous caller. A token that is present
        but invalid is still rejected.

        Args:
            token: JWT token string (optional)

        Returns:
            Identity if a token was supplied, None otherwise
        """
        if not token:
            return None
        return self.authenticate(token)
