"""Tests for InviteService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from ctfhub.config import InviteSettings
from ctfhub.domain.error import (
    ConflictError,
    InviteExpiredError,
    NotFoundError,
    ValidationError,
)
from ctfhub.domain.model import Invite
from ctfhub.domain.service import InviteService
from ctfhub.domain.value import InviteCode, InviteId, TeamId, UserId, utcnow
from ctfhub.persistence.repository.inmemory import InMemoryInviteRepository
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestInviteServiceCreate:
    """Tests for invite creation."""

    @pytest.mark.asyncio
    async def test_create_invite_generates_hex_code(self, unit_env):
        # Arrange
        service = await unit_env.get(InviteService)
        team_id, creator = TeamId(uuid4()), UserId(uuid4())

        # Act
        invite = await service.create_invite(team_id, creator, max_uses=3)

        # Assert
        assert len(invite.code.root) == 6
        int(invite.code.root, 16)
        assert invite.team_id == team_id
        assert invite.created_by == creator
        assert invite.max_uses == 3
        assert invite.uses == []

    @pytest.mark.asyncio
    async def test_past_expiry_is_rejected(self, unit_env):
        service = await unit_env.get(InviteService)

        with pytest.raises(ValidationError):
            await service.create_invite(
                TeamId(uuid4()), UserId(uuid4()), expiry=utcnow() - timedelta(hours=1)
            )

    @pytest.mark.asyncio
    async def test_zero_max_uses_is_rejected(self, unit_env):
        service = await unit_env.get(InviteService)

        with pytest.raises(ValidationError):
            await service.create_invite(TeamId(uuid4()), UserId(uuid4()), max_uses=0)

    @pytest.mark.asyncio
    async def test_gives_up_when_every_code_collides(self):
        repository = InMemoryInviteRepository()
        service = InviteService(
            repository, InviteSettings(code_bytes=1, code_attempts=3)
        )
        team_id, creator = TeamId(uuid4()), UserId(uuid4())
        # Occupy every possible one-byte code
        for value in range(256):
            await repository.save(
                Invite(
                    id=InviteId(uuid4()),
                    code=InviteCode(f"{value:02x}"),
                    team_id=team_id,
                    created_by=creator,
                )
            )

        with pytest.raises(ConflictError) as exc_info:
            await service.create_invite(team_id, creator)

        assert exc_info.value.error_code == "error_invite_code_unavailable"


class TestInviteServiceLookup:
    """Tests for finding invites by code."""

    @pytest.mark.asyncio
    async def test_get_by_code(self, unit_env):
        service = await unit_env.get(InviteService)
        invite = await service.create_invite(TeamId(uuid4()), UserId(uuid4()))

        found = await service.get_by_code(invite.code.root)

        assert found.id == invite.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", ["ffffff", "not-a-code", ""])
    async def test_unknown_or_malformed_code_is_not_found(self, unit_env, code):
        service = await unit_env.get(InviteService)

        with pytest.raises(NotFoundError) as exc_info:
            await service.get_by_code(code)

        assert exc_info.value.error_code == "error_invite_not_found"


class TestInviteServiceRecordUse:
    """Tests for redemption bookkeeping."""

    @pytest.mark.asyncio
    async def test_single_use_invite_rejects_second_use(self, unit_env):
        # Arrange
        service = await unit_env.get(InviteService)
        invite = await service.create_invite(
            TeamId(uuid4()), UserId(uuid4()), max_uses=1
        )
        first, second = UserId(uuid4()), UserId(uuid4())

        # Act
        used = await service.record_use(invite, first)

        # Assert
        assert used.uses == [first]
        with pytest.raises(InviteExpiredError) as exc_info:
            await service.record_use(used, second)
        assert exc_info.value.error_code == "error_expired_invite"

    @pytest.mark.asyncio
    async def test_same_user_cannot_use_twice(self, unit_env):
        service = await unit_env.get(InviteService)
        invite = await service.create_invite(TeamId(uuid4()), UserId(uuid4()))
        user = UserId(uuid4())
        invite = await service.record_use(invite, user)

        with pytest.raises(ConflictError):
            await service.record_use(invite, user)

    @pytest.mark.asyncio
    async def test_expired_invite_is_not_usable(self, unit_env):
        service = await unit_env.get(InviteService)
        invite = await service.create_invite(TeamId(uuid4()), UserId(uuid4()))
        expired = invite.model_copy(update={"expiry": utcnow() - timedelta(minutes=1)})

        with pytest.raises(InviteExpiredError):
            service.ensure_usable(expired)

    @pytest.mark.asyncio
    async def test_delete_for_team_only_removes_that_team(self, unit_env):
        service = await unit_env.get(InviteService)
        team_a, team_b = TeamId(uuid4()), TeamId(uuid4())
        creator = UserId(uuid4())
        await service.create_invite(team_a, creator)
        await service.create_invite(team_a, creator)
        kept = await service.create_invite(team_b, creator)

        assert await service.delete_for_team(team_a) == 2
        assert (await service.get_by_code(kept.code.root)).id == kept.id
