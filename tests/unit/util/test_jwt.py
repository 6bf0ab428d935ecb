"""Tests for JWT helpers."""

from uuid import uuid4

import jwt
import pytest

from ctfhub.config import AuthSettings
from ctfhub.util.jwt import JWTError, create_token, verify_token


@pytest.fixture
def settings() -> AuthSettings:
    return AuthSettings(jwt_secret="unit-test-secret", jwt_expiry_days=1)


def test_claims_use_login_service_names(settings):
    user_id = str(uuid4())

    token = create_token(user_id, True, settings)

    claims = jwt.decode(token, settings.jwt_secret, algorithms=["HS256"])
    assert claims["id"] == user_id
    assert claims["isAdmin"] is True
    assert "exp" in claims


def test_verify_token(settings):
    user_id = str(uuid4())

    payload = verify_token(create_token(user_id, False, settings), settings)

    assert payload.id == user_id
    assert payload.is_admin is False


def test_negative_expiry_is_expired(settings):
    expired = settings.model_copy(update={"jwt_expiry_days": -1})

    with pytest.raises(JWTError, match="expired"):
        verify_token(create_token(str(uuid4()), False, expired), settings)


def test_tampered_token(settings):
    token = create_token(str(uuid4()), False, settings)

    with pytest.raises(JWTError, match="Invalid"):
        verify_token(token + "x", settings)


@pytest.mark.parametrize("claim", ["true", "yes", 1])
def test_admin_claim_must_be_boolean(settings, claim):
    token = jwt.encode(
        {"id": str(uuid4()), "isAdmin": claim, "exp": 4102444800},
        settings.jwt_secret,
        algorithm="HS256",
    )

    with pytest.raises(JWTError, match="malformed"):
        verify_token(token, settings)
