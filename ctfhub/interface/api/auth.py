"""Bearer token extraction for route handlers."""

from fastapi import Header

from ctfhub.domain.error import MissingCredentialsError

BEARER_PREFIX = "bearer "


def _strip_bearer(authorization: str | None) -> str | None:
    if not authorization:
        return None
    if authorization[: len(BEARER_PREFIX)].lower() != BEARER_PREFIX:
        return None
    token = authorization[len(BEARER_PREFIX) :].strip()
    return token or None


def bearer_token(authorization: str | None = Header(default=None)) -> str:
    """Return the bearer token of the request.

    Raises:
        MissingCredentialsError: If there is no ``Authorization: Bearer`` header
    """
    token = _strip_bearer(authorization)
    if token is None:
        raise MissingCredentialsError()
    return token


def optional_bearer_token(
    authorization: str | None = Header(default=None),
) -> str | None:
    """Return the bearer token of the request, if any."""
    return _strip_bearer(authorization)
