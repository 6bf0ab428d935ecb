"""Tests for user use cases."""

from uuid import uuid4

import pytest

from ctfhub.application.usecase.user import (
    GetUserDetailsRequest,
    GetUserDetailsUseCase,
    UpdateUserDetailsRequest,
    UpdateUserDetailsUseCase,
)
from ctfhub.application.usecase.views import PublicUserView, UserView
from ctfhub.domain.error import NotFoundError
from ctfhub.domain.repository import UserRepository
from tests.conftest import make_user, token_for
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetUserDetails:
    """Tests for GetUserDetailsUseCase."""

    @pytest.mark.asyncio
    async def test_caller_gets_own_full_record(self, unit_env):
        # Arrange
        alice = await (await unit_env.get(UserRepository)).save(make_user("alice"))
        use_case = await unit_env.get(GetUserDetailsUseCase)

        # Act
        view = await use_case.execute(GetUserDetailsRequest(token=token_for(alice)))

        # Assert
        assert isinstance(view, UserView)
        assert view.id == str(alice.id)
        assert view.email == "alice@example.com"
        assert view.teams == []

    @pytest.mark.asyncio
    async def test_other_user_gets_public_view(self, unit_env):
        repository = await unit_env.get(UserRepository)
        alice = await repository.save(make_user("alice"))
        bob = await repository.save(make_user("bob"))
        use_case = await unit_env.get(GetUserDetailsUseCase)

        view = await use_case.execute(
            GetUserDetailsRequest(token=token_for(bob), user_id=alice.id)
        )

        assert type(view) is PublicUserView
        assert view.model_dump() == {"id": str(alice.id), "username": "alice"}

    @pytest.mark.asyncio
    async def test_admin_gets_full_view_of_anyone(self, unit_env):
        repository = await unit_env.get(UserRepository)
        alice = await repository.save(make_user("alice"))
        root = await repository.save(make_user("root", is_admin=True))
        use_case = await unit_env.get(GetUserDetailsUseCase)

        view = await use_case.execute(
            GetUserDetailsRequest(token=token_for(root), user_id=alice.id)
        )

        assert isinstance(view, UserView)
        assert view.email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        alice = await (await unit_env.get(UserRepository)).save(make_user("alice"))
        use_case = await unit_env.get(GetUserDetailsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetUserDetailsRequest(token=token_for(alice), user_id=uuid4())
            )


class TestUpdateUserDetails:
    """Tests for UpdateUserDetailsUseCase."""

    @pytest.mark.asyncio
    async def test_partial_update(self, unit_env):
        repository = await unit_env.get(UserRepository)
        alice = await repository.save(make_user("alice"))
        use_case = await unit_env.get(UpdateUserDetailsUseCase)

        await use_case.execute(
            UpdateUserDetailsRequest(token=token_for(alice), email="a@ctf.example")
        )

        stored = await repository.find_by_id(alice.id)
        assert stored.email == "a@ctf.example"
        assert stored.username.root == "alice"
