"""Invite use cases."""

from ctfhub.application.usecase.invite.create_invite import (
    CreateInviteRequest,
    CreateInviteUseCase,
)
from ctfhub.application.usecase.invite.delete_invite import (
    DeleteInviteRequest,
    DeleteInviteUseCase,
)
from ctfhub.application.usecase.invite.get_invite import (
    GetInviteRequest,
    GetInviteUseCase,
)
from ctfhub.application.usecase.invite.use_invite import (
    UseInviteRequest,
    UseInviteUseCase,
)

__all__ = [
    "CreateInviteRequest",
    "CreateInviteUseCase",
    "DeleteInviteRequest",
    "DeleteInviteUseCase",
    "GetInviteRequest",
    "GetInviteUseCase",
    "UseInviteRequest",
    "UseInviteUseCase",
]
