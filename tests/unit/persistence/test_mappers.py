"""Tests for row/domain mappers."""

from datetime import datetime, timezone
from uuid import uuid4

from ctfhub.domain.value import TeamName
from ctfhub.persistence.mappers import (
    ctf_to_dict,
    invite_to_dict,
    row_to_ctf,
    row_to_invite,
    row_to_team,
    row_to_user,
    team_to_dict,
    user_to_dict,
)
from ctfhub.persistence.tables import ctfs_table, invites_table, teams_table, users_table

NOW = datetime(2026, 5, 1, 12, 0, tzinfo=timezone.utc)


def test_user_round_trip_keeps_team_order():
    team_ids = [uuid4(), uuid4()]
    row = {
        "id": str(uuid4()),
        "username": "alice",
        "email": None,
        "is_admin": True,
        "created_at": NOW,
        "updated_at": NOW,
    }

    user = row_to_user(row, team_ids)

    assert user.team_ids == team_ids
    assert user.is_admin is True
    assert set(user_to_dict(user)) == {c.name for c in users_table.columns}


def test_team_row_carries_socials_and_relations():
    owner, member, invite = uuid4(), uuid4(), uuid4()
    row = {
        "id": uuid4(),
        "name": "alpha",
        "owner_id": owner,
        "twitter": "@alpha",
        "website": None,
        "created_at": NOW,
        "updated_at": NOW,
    }

    team = row_to_team(row, [member], [invite])

    assert team.name == TeamName("alpha")
    assert team.member_ids == [member]
    assert team.invite_ids == [invite]
    assert team.socials.twitter == "@alpha"
    assert team_to_dict(team) == row


def test_invite_row_excludes_uses():
    user = uuid4()
    row = {
        "id": uuid4(),
        "code": "a1b2c3",
        "team_id": uuid4(),
        "created_by": uuid4(),
        "created_at": NOW,
        "expiry": None,
        "max_uses": 2,
    }

    invite = row_to_invite(row, [user])

    assert invite.uses == [user]
    assert invite_to_dict(invite) == row
    assert set(row) == {c.name for c in invites_table.columns}


def test_ctf_round_trip():
    row = {
        "id": uuid4(),
        "team_id": uuid4(),
        "name": "HITCON",
        "description": None,
        "archived": False,
        "created_by": uuid4(),
        "created_at": NOW,
        "updated_at": NOW,
    }

    assert ctf_to_dict(row_to_ctf(row)) == row
    assert set(row) == {c.name for c in ctfs_table.columns}
    assert "name" in {c.name for c in teams_table.columns}
