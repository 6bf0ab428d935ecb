"""Response views shared across use cases.

Views translate domain entities into the API's wire shape. Identifiers are
rendered as strings and field names as camelCase.
"""

from datetime import datetime

from pydantic import ConfigDict, Field

from ctfhub.application.usecase.base import ApiModel
from ctfhub.domain.model import Ctf, Invite, Team, User


class SocialsView(ApiModel):
    """Team social links."""

    twitter: str | None = None
    website: str | None = None


class TeamView(ApiModel):
    """Team with owner, members (owner excluded) and invite IDs."""

    id: str
    name: str
    owner: str
    members: list[str]
    invites: list[str]
    socials: SocialsView
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, team: Team) -> "TeamView":
        return cls(
            id=str(team.id),
            name=team.name.root,
            owner=str(team.owner_id),
            members=[str(m) for m in team.member_ids],
            invites=[str(i) for i in team.invite_ids],
            socials=SocialsView(
                twitter=team.socials.twitter, website=team.socials.website
            ),
            created_at=team.created_at,
            updated_at=team.updated_at,
        )


class InviteBasicView(ApiModel):
    """What anyone holding an invite code may see."""

    model_config = ConfigDict(extra="forbid")

    code: str
    team_id: str = Field(alias="teamID")
    team_name: str
    created_at: datetime
    expiry: datetime | None
    max_uses: int | None


class InviteView(InviteBasicView):
    """Full invite, including creator and redemptions."""

    id: str
    created_by: str
    uses: list[str]

    @classmethod
    def from_domain(cls, invite: Invite, team_name: str) -> "InviteView":
        return cls(
            id=str(invite.id),
            code=invite.code.root,
            team_id=str(invite.team_id),
            team_name=team_name,
            created_by=str(invite.created_by),
            created_at=invite.created_at,
            expiry=invite.expiry,
            max_uses=invite.max_uses,
            uses=[str(u) for u in invite.uses],
        )


def basic_invite_view(invite: Invite, team_name: str) -> InviteBasicView:
    """Build the reduced invite view shown to non-admin callers."""
    return InviteBasicView(
        code=invite.code.root,
        team_id=str(invite.team_id),
        team_name=team_name,
        created_at=invite.created_at,
        expiry=invite.expiry,
        max_uses=invite.max_uses,
    )


class PublicUserView(ApiModel):
    """User details visible to other users."""

    model_config = ConfigDict(extra="forbid")

    id: str
    username: str


class UserView(PublicUserView):
    """User details visible to the user themselves and to admins."""

    email: str | None
    is_admin: bool
    teams: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserView":
        return cls(
            id=str(user.id),
            username=user.username.root,
            email=user.email,
            is_admin=user.is_admin,
            teams=[str(t) for t in user.team_ids],
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class CtfView(ApiModel):
    """CTF tracked by a team."""

    id: str
    team_id: str = Field(alias="teamID")
    name: str
    description: str | None
    archived: bool
    created_by: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, ctf: Ctf) -> "CtfView":
        return cls(
            id=str(ctf.id),
            team_id=str(ctf.team_id),
            name=ctf.name,
            description=ctf.description,
            archived=ctf.archived,
            created_by=str(ctf.created_by),
            created_at=ctf.created_at,
            updated_at=ctf.updated_at,
        )
