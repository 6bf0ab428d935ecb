"""Shared fixtures for end-to-end API tests."""

import pytest
from fastapi.testclient import TestClient

from ctfhub.domain.model import User
from ctfhub.interface.api.app import create_app
from ctfhub.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import make_user
from tests.di import build_test_container


@pytest.fixture
def database() -> InMemoryDatabase:
    """In-memory store shared by every request of one test."""
    return InMemoryDatabase()


@pytest.fixture
def client(database):
    """Create test client with test container."""
    app_instance = create_app(build_test_container(database=database))
    return TestClient(app_instance, raise_server_exceptions=False)


@pytest.fixture
def register(database):
    """Register users directly, as the account service would."""

    def _register(username: str, is_admin: bool = False) -> User:
        user = make_user(username, is_admin=is_admin)
        database.users[user.id] = user
        return user

    return _register
