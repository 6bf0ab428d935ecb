"""Test configuration and helpers."""

from uuid import uuid4

from ctfhub.config import Settings
from ctfhub.domain.model import User
from ctfhub.domain.value import UserId, Username
from ctfhub.util.jwt import create_token


def make_user(username: str = "alice", is_admin: bool = False) -> User:
    """Build a user record as the account service would register it."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=f"{username}@example.com",
        is_admin=is_admin,
    )


def token_for(user: User) -> str:
    """Mint a bearer token for the user, signed with the configured secret."""
    return create_token(str(user.id), user.is_admin, Settings().auth)


def auth(user: User) -> dict[str, str]:
    """Authorization header carrying the user's bearer token."""
    return {"Authorization": f"Bearer {token_for(user)}"}
