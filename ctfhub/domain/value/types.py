"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and normalization.
"""

import re

from pydantic import field_validator

from ctfhub.domain.value.common import RootValueObject, ValueObject
from ctfhub.domain.value.identifiers import UserId


class TeamName(RootValueObject[str]):
    """Team name.

    Names are unique across teams regardless of casing, so they are stored
    lower-cased. Leading and trailing whitespace is stripped.
    """

    @field_validator("root")
    @classmethod
    def normalize_team_name(cls, v: str) -> str:
        """Strip, lower-case and bound the name."""
        v = v.strip().lower()
        if len(v) < 1 or len(v) > 64:
            raise ValueError("Team name must be 1-64 characters")
        return v


class Username(RootValueObject[str]):
    """Platform username."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not empty and within length limits."""
        if len(v) < 1 or len(v) > 64:
            raise ValueError("Username must be 1-64 characters")
        return v


class InviteCode(RootValueObject[str]):
    """Short random hex code identifying a team invite."""

    @field_validator("root")
    @classmethod
    def validate_code_format(cls, v: str) -> str:
        """Validate the code is non-empty lower-case hex."""
        if not re.fullmatch(r"[0-9a-f]{1,64}", v):
            raise ValueError("Invite code must be 1-64 lower-case hex characters")
        return v


class TeamSocials(ValueObject):
    """Optional social links shown on a team's profile."""

    twitter: str | None = None
    website: str | None = None


class Identity(ValueObject):
    """Verified caller identity extracted from a bearer token."""

    user_id: UserId
    is_admin: bool = False
