"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Relations stored in
junction tables are passed in alongside the main row.
"""

from typing import Any, Dict
from uuid import UUID

from ctfhub.domain.model import Ctf, Invite, Team, User
from ctfhub.domain.value import (
    CtfId,
    InviteCode,
    InviteId,
    TeamId,
    TeamName,
    TeamSocials,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any], team_ids: list[UUID]) -> User:
    """Convert database row to User domain model.

    Args:
        row: ``users`` row as dict
        team_ids: Team IDs from ``user_teams`` in join order

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row.get("email"),
        is_admin=row["is_admin"],
        team_ids=[TeamId(_uuid(t)) for t in team_ids],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to a ``users`` row dict."""
    return {
        "id": user.id,
        "username": user.username.root,
        "email": user.email,
        "is_admin": user.is_admin,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_team(
    row: Dict[str, Any], member_ids: list[UUID], invite_ids: list[UUID]
) -> Team:
    """Convert database row to Team domain model.

    Args:
        row: ``teams`` row as dict
        member_ids: Members from ``team_members`` in join order
        invite_ids: Invites of the team in creation order

    Returns:
        Team domain model
    """
    return Team(
        id=TeamId(_uuid(row["id"])),
        name=TeamName(row["name"]),
        owner_id=UserId(_uuid(row["owner_id"])),
        member_ids=[UserId(_uuid(m)) for m in member_ids],
        invite_ids=[InviteId(_uuid(i)) for i in invite_ids],
        socials=TeamSocials(twitter=row.get("twitter"), website=row.get("website")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def team_to_dict(team: Team) -> Dict[str, Any]:
    """Convert Team domain model to a ``teams`` row dict."""
    return {
        "id": team.id,
        "name": team.name.root,
        "owner_id": team.owner_id,
        "twitter": team.socials.twitter,
        "website": team.socials.website,
        "created_at": team.created_at,
        "updated_at": team.updated_at,
    }


def row_to_invite(row: Dict[str, Any], uses: list[UUID]) -> Invite:
    """Convert database row to Invite domain model.

    Args:
        row: ``invites`` row as dict
        uses: Redeeming users from ``invite_uses`` in redemption order

    Returns:
        Invite domain model
    """
    return Invite(
        id=InviteId(_uuid(row["id"])),
        code=InviteCode(row["code"]),
        team_id=TeamId(_uuid(row["team_id"])),
        created_by=UserId(_uuid(row["created_by"])),
        created_at=row["created_at"],
        expiry=row.get("expiry"),
        max_uses=row.get("max_uses"),
        uses=[UserId(_uuid(u)) for u in uses],
    )


def invite_to_dict(invite: Invite) -> Dict[str, Any]:
    """Convert Invite domain model to an ``invites`` row dict."""
    return {
        "id": invite.id,
        "code": invite.code.root,
        "team_id": invite.team_id,
        "created_by": invite.created_by,
        "created_at": invite.created_at,
        "expiry": invite.expiry,
        "max_uses": invite.max_uses,
    }


def row_to_ctf(row: Dict[str, Any]) -> Ctf:
    """Convert database row to Ctf domain model."""
    return Ctf(
        id=CtfId(_uuid(row["id"])),
        team_id=TeamId(_uuid(row["team_id"])),
        name=row["name"],
        description=row.get("description"),
        archived=row["archived"],
        created_by=UserId(_uuid(row["created_by"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def ctf_to_dict(ctf: Ctf) -> Dict[str, Any]:
    """Convert Ctf domain model to a ``ctfs`` row dict."""
    return ctf.model_dump()
