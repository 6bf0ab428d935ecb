"""Tests for invite use cases."""

from datetime import timedelta
from uuid import UUID

import pytest

from ctfhub.application.usecase.invite import (
    CreateInviteRequest,
    CreateInviteUseCase,
    DeleteInviteRequest,
    DeleteInviteUseCase,
    GetInviteRequest,
    GetInviteUseCase,
    UseInviteRequest,
    UseInviteUseCase,
)
from ctfhub.application.usecase.team import (
    CreateTeamRequest,
    CreateTeamUseCase,
    LeaveTeamRequest,
    LeaveTeamUseCase,
)
from ctfhub.application.usecase.views import InviteBasicView, InviteView
from ctfhub.domain.error import (
    AuthorizationError,
    ConflictError,
    InvalidTokenError,
    InviteExpiredError,
    NotFoundError,
    ValidationError,
)
from ctfhub.domain.model import User
from ctfhub.domain.repository import InviteRepository, TeamRepository, UserRepository
from ctfhub.domain.value import InviteCode, TeamId, utcnow
from tests.conftest import make_user, token_for
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed(env, *names: str, admin: str | None = None) -> list[User]:
    repository = await env.get(UserRepository)
    return [
        await repository.save(make_user(name, is_admin=(name == admin)))
        for name in names
    ]


async def _create_team(env, owner: User, name: str = "alpha") -> TeamId:
    use_case = await env.get(CreateTeamUseCase)
    response = await use_case.execute(
        CreateTeamRequest(token=token_for(owner), team_name=name)
    )
    return TeamId(UUID(response.team_id))


async def _create_invite(env, owner: User, team_id: TeamId, **kwargs) -> InviteView:
    use_case = await env.get(CreateInviteUseCase)
    return await use_case.execute(
        CreateInviteRequest(token=token_for(owner), team_id=team_id, **kwargs)
    )


async def _expire(env, code: str) -> None:
    repository = await env.get(InviteRepository)
    invite = await repository.find_by_code(InviteCode(code))
    await repository.save(
        invite.model_copy(update={"expiry": utcnow() - timedelta(minutes=5)})
    )


class TestCreateInvite:
    """Tests for CreateInviteUseCase."""

    @pytest.mark.asyncio
    async def test_owner_creates_invite(self, unit_env):
        # Arrange
        (alice,) = await _seed(unit_env, "alice")
        team_id = await _create_team(unit_env, alice)
        expiry = utcnow() + timedelta(days=1)

        # Act
        view = await _create_invite(
            unit_env, alice, team_id, expiry=expiry, max_uses=5
        )

        # Assert
        assert view.team_id == str(team_id)
        assert view.team_name == "alpha"
        assert view.created_by == str(alice.id)
        assert view.max_uses == 5
        assert view.expiry == expiry
        assert view.uses == []
        team = await (await unit_env.get(TeamRepository)).find_by_id(team_id)
        assert [str(i) for i in team.invite_ids] == [view.id]

    @pytest.mark.asyncio
    async def test_member_cannot_create_invite(self, unit_env):
        alice, bob = await _seed(unit_env, "alice", "bob")
        team_id = await _create_team(unit_env, alice)
        invite = await _create_invite(unit_env, alice, team_id)
        use_invite = await unit_env.get(UseInviteUseCase)
        await use_invite.execute(UseInviteRequest(token=token_for(bob), code=invite.code))

        with pytest.raises(AuthorizationError):
            await _create_invite(unit_env, bob, team_id)

    @pytest.mark.asyncio
    async def test_admin_creates_invite_for_any_team(self, unit_env):
        alice, root = await _seed(unit_env, "alice", "root", admin="root")
        team_id = await _create_team(unit_env, alice)

        view = await _create_invite(unit_env, root, team_id)

        assert view.created_by == str(root.id)

    @pytest.mark.asyncio
    async def test_past_expiry_is_rejected(self, unit_env):
        (alice,) = await _seed(unit_env, "alice")
        team_id = await _create_team(unit_env, alice)

        with pytest.raises(ValidationError):
            await _create_invite(
                unit_env, alice, team_id, expiry=utcnow() - timedelta(seconds=1)
            )


class TestUseInvite:
    """Tests for UseInviteUseCase."""

    @pytest.mark.asyncio
    async def test_single_use_invite_admits_one_user(self, unit_env):
        # Arrange
        alice, bob, carol = await _seed(unit_env, "alice", "bob", "carol")
        team_id = await _create_team(unit_env, alice)
        invite = await _create_invite(unit_env, alice, team_id, max_uses=1)
        use_case = await unit_env.get(UseInviteUseCase)

        # Act
        team = await use_case.execute(
            UseInviteRequest(token=token_for(bob), code=invite.code)
        )

        # Assert
        assert team.members == [str(bob.id)]
        with pytest.raises(InviteExpiredError):
            await use_case.execute(
                UseInviteRequest(token=token_for(carol), code=invite.code)
            )
        stored = await (await unit_env.get(TeamRepository)).find_by_id(team_id)
        assert stored.member_ids == [bob.id]
        bob = await (await unit_env.get(UserRepository)).find_by_id(bob.id)
        assert bob.team_ids == [team_id]

    @pytest.mark.asyncio
    async def test_records_each_use(self, unit_env):
        alice, bob, carol = await _seed(unit_env, "alice", "bob", "carol")
        team_id = await _create_team(unit_env, alice)
        invite = await _create_invite(unit_env, alice, team_id)
        use_case = await unit_env.get(UseInviteUseCase)

        for user in (bob, carol):
            await use_case.execute(
                UseInviteRequest(token=token_for(user), code=invite.code)
            )

        stored = await (await unit_env.get(InviteRepository)).find_by_code(
            InviteCode(invite.code)
        )
        assert stored.uses == [bob.id, carol.id]

    @pytest.mark.asyncio
    async def test_member_cannot_join_twice(self, unit_env):
        alice, bob = await _seed(unit_env, "alice", "bob")
        team_id = await _create_team(unit_env, alice)
        invite = await _create_invite(unit_env, alice, team_id)
        use_case = await unit_env.get(UseInviteUseCase)
        await use_case.execute(UseInviteRequest(token=token_for(bob), code=invite.code))

        with pytest.raises(ConflictError) as exc_info:
            await use_case.execute(
                UseInviteRequest(token=token_for(bob), code=invite.code)
            )

        assert exc_info.value.error_code == "error_already_in_team"

    @pytest.mark.asyncio
    async def test_rejoining_with_used_invite_writes_nothing(self, unit_env):
        alice, bob = await _seed(unit_env, "alice", "bob")
        team_id = await _create_team(unit_env, alice)
        invite = await _create_invite(unit_env, alice, team_id)
        use_case = await unit_env.get(UseInviteUseCase)
        await use_case.execute(UseInviteRequest(token=token_for(bob), code=invite.code))
        leave = await unit_env.get(LeaveTeamUseCase)
        await leave.execute(LeaveTeamRequest(token=token_for(bob), team_id=team_id))

        with pytest.raises(ConflictError) as exc_info:
            await use_case.execute(
                UseInviteRequest(token=token_for(bob), code=invite.code)
            )

        assert exc_info.value.error_code == "error_invite_already_used"
        team = await (await unit_env.get(TeamRepository)).find_by_id(team_id)
        assert team.member_ids == []
        bob = await (await unit_env.get(UserRepository)).find_by_id(bob.id)
        assert bob.team_ids == []

    @pytest.mark.asyncio
    async def test_owner_cannot_use_own_invite(self, unit_env):
        (alice,) = await _seed(unit_env, "alice")
        team_id = await _create_team(unit_env, alice)
        invite = await _create_invite(unit_env, alice, team_id)
        use_case = await unit_env.get(UseInviteUseCase)

        with pytest.raises(ConflictError):
            await use_case.execute(
                UseInviteRequest(token=token_for(alice), code=invite.code)
            )

    @pytest.mark.asyncio
    async def test_expired_invite(self, unit_env):
        alice, bob = await _seed(unit_env, "alice", "bob")
        team_id = await _create_team(unit_env, alice)
        invite = await _create_invite(unit_env, alice, team_id)
        await _expire(unit_env, invite.code)
        use_case = await unit_env.get(UseInviteUseCase)

        with pytest.raises(InviteExpiredError):
            await use_case.execute(
                UseInviteRequest(token=token_for(bob), code=invite.code)
            )

    @pytest.mark.asyncio
    async def test_unknown_code(self, unit_env):
        (bob,) = await _seed(unit_env, "bob")
        use_case = await unit_env.get(UseInviteUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(UseInviteRequest(token=token_for(bob), code="abcdef"))


class TestGetInvite:
    """Tests for GetInviteUseCase."""

    @pytest.mark.asyncio
    async def test_anonymous_caller_gets_basic_view(self, unit_env):
        (alice,) = await _seed(unit_env, "alice")
        team_id = await _create_team(unit_env, alice)
        invite = await _create_invite(unit_env, alice, team_id)
        use_case = await unit_env.get(GetInviteUseCase)

        view = await use_case.execute(GetInviteRequest(code=invite.code))

        assert type(view) is InviteBasicView
        assert view.team_name == "alpha"
        assert "uses" not in view.model_dump()

    @pytest.mark.asyncio
    async def test_non_admin_gets_basic_view(self, unit_env):
        alice, bob = await _seed(unit_env, "alice", "bob")
        team_id = await _create_team(unit_env, alice)
        invite = await _create_invite(unit_env, alice, team_id)
        use_case = await unit_env.get(GetInviteUseCase)

        view = await use_case.execute(
            GetInviteRequest(token=token_for(bob), code=invite.code)
        )

        assert type(view) is InviteBasicView

    @pytest.mark.asyncio
    async def test_admin_sees_expired_invite_in_full(self, unit_env):
        alice, root = await _seed(unit_env, "alice", "root", admin="root")
        team_id = await _create_team(unit_env, alice)
        invite = await _create_invite(unit_env, alice, team_id)
        await _expire(unit_env, invite.code)
        use_case = await unit_env.get(GetInviteUseCase)

        view = await use_case.execute(
            GetInviteRequest(token=token_for(root), code=invite.code)
        )

        assert isinstance(view, InviteView)
        assert view.id == invite.id

    @pytest.mark.asyncio
    async def test_non_admin_cannot_see_expired_invite(self, unit_env):
        (alice,) = await _seed(unit_env, "alice")
        team_id = await _create_team(unit_env, alice)
        invite = await _create_invite(unit_env, alice, team_id)
        await _expire(unit_env, invite.code)
        use_case = await unit_env.get(GetInviteUseCase)

        with pytest.raises(InviteExpiredError):
            await use_case.execute(GetInviteRequest(code=invite.code))

    @pytest.mark.asyncio
    async def test_used_up_invite_is_only_visible_to_admins(self, unit_env):
        # Arrange
        alice, bob, carol, root = await _seed(
            unit_env, "alice", "bob", "carol", "root", admin="root"
        )
        team_id = await _create_team(unit_env, alice)
        invite = await _create_invite(unit_env, alice, team_id, max_uses=1)
        await (await unit_env.get(UseInviteUseCase)).execute(
            UseInviteRequest(token=token_for(bob), code=invite.code)
        )
        use_case = await unit_env.get(GetInviteUseCase)

        # Act & Assert
        with pytest.raises(InviteExpiredError):
            await use_case.execute(GetInviteRequest(code=invite.code))
        with pytest.raises(InviteExpiredError):
            await use_case.execute(
                GetInviteRequest(token=token_for(carol), code=invite.code)
            )

        view = await use_case.execute(
            GetInviteRequest(token=token_for(root), code=invite.code)
        )
        assert isinstance(view, InviteView)
        assert view.uses == [str(bob.id)]
        assert view.created_by == str(alice.id)

    @pytest.mark.asyncio
    async def test_invalid_token_is_rejected(self, unit_env):
        (alice,) = await _seed(unit_env, "alice")
        team_id = await _create_team(unit_env, alice)
        invite = await _create_invite(unit_env, alice, team_id)
        use_case = await unit_env.get(GetInviteUseCase)

        with pytest.raises(InvalidTokenError):
            await use_case.execute(GetInviteRequest(token="junk", code=invite.code))


class TestDeleteInvite:
    """Tests for DeleteInviteUseCase."""

    @pytest.mark.asyncio
    async def test_owner_deletes_invite(self, unit_env):
        (alice,) = await _seed(unit_env, "alice")
        team_id = await _create_team(unit_env, alice)
        invite = await _create_invite(unit_env, alice, team_id)
        use_case = await unit_env.get(DeleteInviteUseCase)

        await use_case.execute(
            DeleteInviteRequest(token=token_for(alice), code=invite.code)
        )

        repository = await unit_env.get(InviteRepository)
        assert await repository.find_by_code(InviteCode(invite.code)) is None
        team = await (await unit_env.get(TeamRepository)).find_by_id(team_id)
        assert team.invite_ids == []

    @pytest.mark.asyncio
    async def test_outsider_cannot_delete(self, unit_env):
        alice, mallory = await _seed(unit_env, "alice", "mallory")
        team_id = await _create_team(unit_env, alice)
        invite = await _create_invite(unit_env, alice, team_id)
        use_case = await unit_env.get(DeleteInviteUseCase)

        with pytest.raises(AuthorizationError):
            await use_case.execute(
                DeleteInviteRequest(token=token_for(mallory), code=invite.code)
            )
