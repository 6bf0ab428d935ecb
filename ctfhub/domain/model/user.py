"""User aggregate root.

Users register through the platform's account service; this service only
tracks their admin flag and team memberships.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ctfhub.domain.model.common import DomainModel
from ctfhub.domain.value import TeamId, UserId, Username, utcnow


class User(DomainModel):
    """User aggregate root.

    ``team_ids`` lists every team the user belongs to, including teams the
    user owns, in the order they were joined.
    """

    id: UserId
    username: Username
    email: Optional[str] = None
    is_admin: bool = False
    team_ids: list[TeamId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def with_team(self, team_id: TeamId) -> "User":
        """Return a copy that lists the team, if it is not listed already."""
        if team_id in self.team_ids:
            return self
        return self.model_copy(
            update={"team_ids": [*self.team_ids, team_id], "updated_at": utcnow()}
        )

    def without_team(self, team_id: TeamId) -> "User":
        """Return a copy with the team removed from its memberships."""
        if team_id not in self.team_ids:
            return self
        return self.model_copy(
            update={
                "team_ids": [t for t in self.team_ids if t != team_id],
                "updated_at": utcnow(),
            }
        )
