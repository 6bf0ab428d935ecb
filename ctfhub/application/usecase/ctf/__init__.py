"""CTF use cases."""

from ctfhub.application.usecase.ctf.create_ctf import (
    CreateCtfRequest,
    CreateCtfUseCase,
)
from ctfhub.application.usecase.ctf.get_ctf import GetCtfRequest, GetCtfUseCase
from ctfhub.application.usecase.ctf.list_ctfs import ListCtfsRequest, ListCtfsUseCase
from ctfhub.application.usecase.ctf.set_ctf_archived import (
    SetCtfArchivedRequest,
    SetCtfArchivedUseCase,
)

__all__ = [
    "CreateCtfRequest",
    "CreateCtfUseCase",
    "GetCtfRequest",
    "GetCtfUseCase",
    "ListCtfsRequest",
    "ListCtfsUseCase",
    "SetCtfArchivedRequest",
    "SetCtfArchivedUseCase",
]
