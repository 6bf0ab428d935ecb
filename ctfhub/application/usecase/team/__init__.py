"""Team use cases."""

from ctfhub.application.usecase.team.create_team import (
    CreateTeamRequest,
    CreateTeamResponse,
    CreateTeamUseCase,
)
from ctfhub.application.usecase.team.delete_team import (
    DeleteTeamRequest,
    DeleteTeamUseCase,
)
from ctfhub.application.usecase.team.get_team import GetTeamRequest, GetTeamUseCase
from ctfhub.application.usecase.team.leave_team import (
    LeaveTeamRequest,
    LeaveTeamUseCase,
)
from ctfhub.application.usecase.team.update_owner import (
    UpdateOwnerRequest,
    UpdateOwnerUseCase,
)
from ctfhub.application.usecase.team.update_team import (
    UpdateTeamRequest,
    UpdateTeamUseCase,
)

__all__ = [
    "CreateTeamRequest",
    "CreateTeamResponse",
    "CreateTeamUseCase",
    "DeleteTeamRequest",
    "DeleteTeamUseCase",
    "GetTeamRequest",
    "GetTeamUseCase",
    "LeaveTeamRequest",
    "LeaveTeamUseCase",
    "UpdateOwnerRequest",
    "UpdateOwnerUseCase",
    "UpdateTeamRequest",
    "UpdateTeamUseCase",
]
