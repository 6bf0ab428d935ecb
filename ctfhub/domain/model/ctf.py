"""CTF entity.

Teams keep a list of the competitions they play. Archived CTFs are hidden
from listings unless explicitly requested.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from ctfhub.domain.model.common import DomainModel
from ctfhub.domain.value import CtfId, TeamId, UserId, utcnow


class Ctf(DomainModel):
    """A capture-the-flag event tracked by a team."""

    id: CtfId
    team_id: TeamId
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=2000)
    archived: bool = False
    created_by: UserId
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
