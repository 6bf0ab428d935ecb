"""Tests for TeamService."""

from uuid import uuid4

import pytest

from ctfhub.domain.error import (
    AuthorizationError,
    ConflictError,
    InvalidOwnershipTransferError,
    NotFoundError,
)
from ctfhub.domain.service import TeamService
from ctfhub.domain.value import Identity, TeamId, TeamName, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _identity(user_id: UserId, is_admin: bool = False) -> Identity:
    return Identity(user_id=user_id, is_admin=is_admin)


class TestTeamServiceCreate:
    """Tests for team creation and naming."""

    @pytest.mark.asyncio
    async def test_create_team_normalizes_name(self, unit_env):
        # Arrange
        service = await unit_env.get(TeamService)
        owner = UserId(uuid4())

        # Act
        team = await service.create_team(owner, TeamName("  Alpha "))

        # Assert
        assert team.name.root == "alpha"
        assert team.owner_id == owner
        assert team.member_ids == []

    @pytest.mark.asyncio
    async def test_create_team_duplicate_name_conflicts(self, unit_env):
        service = await unit_env.get(TeamService)
        await service.create_team(UserId(uuid4()), TeamName("alpha"))

        with pytest.raises(ConflictError) as exc_info:
            await service.create_team(UserId(uuid4()), TeamName("ALPHA"))

        assert exc_info.value.error_code == "error_team_exists"

    @pytest.mark.asyncio
    async def test_rename_to_taken_name_conflicts(self, unit_env):
        service = await unit_env.get(TeamService)
        await service.create_team(UserId(uuid4()), TeamName("alpha"))
        beta = await service.create_team(UserId(uuid4()), TeamName("beta"))

        with pytest.raises(ConflictError):
            await service.update_details(beta, name=TeamName("alpha"))

    @pytest.mark.asyncio
    async def test_update_details_keeps_unset_fields(self, unit_env):
        service = await unit_env.get(TeamService)
        team = await service.create_team(UserId(uuid4()), TeamName("alpha"))
        team = await service.update_details(team, twitter="@alpha")

        updated = await service.update_details(team, website="https://alpha.example")

        assert updated.name.root == "alpha"
        assert updated.socials.twitter == "@alpha"
        assert updated.socials.website == "https://alpha.example"

    @pytest.mark.asyncio
    async def test_get_by_id_missing_team(self, unit_env):
        service = await unit_env.get(TeamService)

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_by_id(TeamId(uuid4()))

        assert exc_info.value.error_code == "error_team_not_found"


class TestTeamServiceAuthorization:
    """Tests for view and owner checks."""

    @pytest.mark.asyncio
    async def test_members_and_admins_can_view(self, unit_env):
        service = await unit_env.get(TeamService)
        owner, member = UserId(uuid4()), UserId(uuid4())
        team = await service.create_team(owner, TeamName("alpha"))
        team = await service.add_member(team, member)

        service.ensure_can_view(team, _identity(owner))
        service.ensure_can_view(team, _identity(member))
        service.ensure_can_view(team, _identity(UserId(uuid4()), is_admin=True))

        with pytest.raises(AuthorizationError) as exc_info:
            service.ensure_can_view(team, _identity(UserId(uuid4())))
        assert exc_info.value.error_code == "error_invalid_permissions"

    @pytest.mark.asyncio
    async def test_only_owner_or_admin_passes_owner_check(self, unit_env):
        service = await unit_env.get(TeamService)
        owner, member = UserId(uuid4()), UserId(uuid4())
        team = await service.create_team(owner, TeamName("alpha"))
        team = await service.add_member(team, member)

        service.ensure_owner(team, _identity(owner), "create invites")
        service.ensure_owner(team, _identity(member, is_admin=True), "create invites")

        with pytest.raises(AuthorizationError, match="create invites"):
            service.ensure_owner(team, _identity(member), "create invites")


class TestTeamServiceMembership:
    """Tests for joining and leaving."""

    @pytest.mark.asyncio
    async def test_add_member_twice_conflicts(self, unit_env):
        service = await unit_env.get(TeamService)
        member = UserId(uuid4())
        team = await service.create_team(UserId(uuid4()), TeamName("alpha"))
        team = await service.add_member(team, member)

        with pytest.raises(ConflictError) as exc_info:
            await service.add_member(team, member)

        assert exc_info.value.error_code == "error_already_in_team"

    @pytest.mark.asyncio
    async def test_owner_cannot_join_own_team(self, unit_env):
        service = await unit_env.get(TeamService)
        owner = UserId(uuid4())
        team = await service.create_team(owner, TeamName("alpha"))

        with pytest.raises(ConflictError):
            await service.add_member(team, owner)

    @pytest.mark.asyncio
    async def test_remove_member(self, unit_env):
        service = await unit_env.get(TeamService)
        a, b = UserId(uuid4()), UserId(uuid4())
        team = await service.create_team(UserId(uuid4()), TeamName("alpha"))
        team = await service.add_member(team, a)
        team = await service.add_member(team, b)

        updated = await service.remove_member(team, a)

        assert updated.member_ids == [b]
        assert (await service.get_by_id(team.id)).member_ids == [b]

    @pytest.mark.asyncio
    async def test_owner_cannot_leave(self, unit_env):
        service = await unit_env.get(TeamService)
        owner = UserId(uuid4())
        team = await service.create_team(owner, TeamName("alpha"))

        with pytest.raises(ConflictError) as exc_info:
            await service.remove_member(team, owner)

        assert exc_info.value.error_code == "error_owner_cannot_leave"
        assert exc_info.value.details

    @pytest.mark.asyncio
    async def test_non_member_cannot_leave(self, unit_env):
        service = await unit_env.get(TeamService)
        team = await service.create_team(UserId(uuid4()), TeamName("alpha"))

        with pytest.raises(ConflictError) as exc_info:
            await service.remove_member(team, UserId(uuid4()))

        assert exc_info.value.error_code == "error_not_in_team"


class TestTeamServiceTransferOwnership:
    """Tests for ownership transfer rules."""

    @pytest.mark.asyncio
    async def test_owner_transfers_to_member(self, unit_env):
        # Arrange
        service = await unit_env.get(TeamService)
        owner, member = UserId(uuid4()), UserId(uuid4())
        team = await service.create_team(owner, TeamName("alpha"))
        team = await service.add_member(team, member)

        # Act
        updated = await service.transfer_ownership(team, _identity(owner), member)

        # Assert
        assert updated.owner_id == member
        assert updated.member_ids == [owner]

    @pytest.mark.asyncio
    async def test_previous_owner_cannot_transfer_again(self, unit_env):
        service = await unit_env.get(TeamService)
        owner, member = UserId(uuid4()), UserId(uuid4())
        team = await service.create_team(owner, TeamName("alpha"))
        team = await service.add_member(team, member)
        team = await service.transfer_ownership(team, _identity(owner), member)

        with pytest.raises(InvalidOwnershipTransferError) as exc_info:
            await service.transfer_ownership(team, _identity(owner), owner)

        assert exc_info.value.error_code == "error_user_not_owner"

    @pytest.mark.asyncio
    async def test_non_admin_cannot_transfer_outside_team(self, unit_env):
        service = await unit_env.get(TeamService)
        owner = UserId(uuid4())
        team = await service.create_team(owner, TeamName("alpha"))

        with pytest.raises(InvalidOwnershipTransferError) as exc_info:
            await service.transfer_ownership(team, _identity(owner), UserId(uuid4()))

        assert exc_info.value.error_code == "error_new_owner_not_in_team"

    @pytest.mark.asyncio
    async def test_admin_can_transfer_to_anyone(self, unit_env):
        service = await unit_env.get(TeamService)
        owner, outsider = UserId(uuid4()), UserId(uuid4())
        team = await service.create_team(owner, TeamName("alpha"))
        admin = _identity(UserId(uuid4()), is_admin=True)

        updated = await service.transfer_ownership(team, admin, outsider)

        assert updated.owner_id == outsider
        assert updated.member_ids == [owner]

    @pytest.mark.asyncio
    async def test_transfer_to_current_owner_is_noop(self, unit_env):
        service = await unit_env.get(TeamService)
        owner = UserId(uuid4())
        team = await service.create_team(owner, TeamName("alpha"))

        updated = await service.transfer_ownership(team, _identity(owner), owner)

        assert updated == team
