"""Team aggregate root."""

from datetime import datetime

from pydantic import Field

from ctfhub.domain.model.common import DomainModel
from ctfhub.domain.value import InviteId, TeamId, TeamName, TeamSocials, UserId, utcnow


class Team(DomainModel):
    """Team aggregate root.

    Business rules:
    - Exactly one owner, who is implicitly a member of the team
    - ``member_ids`` holds the other members and never contains the owner
    - The owner must transfer ownership before leaving
    """

    id: TeamId
    name: TeamName
    owner_id: UserId
    member_ids: list[UserId] = Field(default_factory=list)
    invite_ids: list[InviteId] = Field(default_factory=list)
    socials: TeamSocials = Field(default_factory=TeamSocials)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def is_owner(self, user_id: UserId) -> bool:
        return self.owner_id == user_id

    def in_team(self, user_id: UserId) -> bool:
        """Whether the user is the owner or one of the members."""
        return self.is_owner(user_id) or user_id in self.member_ids

    @property
    def all_member_ids(self) -> list[UserId]:
        """Owner first, then members in join order."""
        return [self.owner_id, *self.member_ids]
