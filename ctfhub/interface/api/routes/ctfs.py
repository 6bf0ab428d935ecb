"""Team CTF routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import Field

from ctfhub.application.usecase.base import ApiModel
from ctfhub.application.usecase.ctf import (
    CreateCtfRequest,
    CreateCtfUseCase,
    GetCtfRequest,
    GetCtfUseCase,
    ListCtfsRequest,
    ListCtfsUseCase,
    SetCtfArchivedRequest,
    SetCtfArchivedUseCase,
)
from ctfhub.application.usecase.views import CtfView
from ctfhub.interface.api.auth import bearer_token

router = APIRouter(
    prefix="/teams/{team_id}/ctfs", tags=["ctfs"], route_class=DishkaRoute
)


class CreateCtfAPIRequest(ApiModel):
    """API request for adding a CTF."""

    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=2000)


@router.post("", response_model=CtfView, status_code=status.HTTP_201_CREATED)
async def create_ctf(
    team_id: UUID,
    request: CreateCtfAPIRequest,
    use_case: FromDishka[CreateCtfUseCase],
    token: str = Depends(bearer_token),
) -> CtfView:
    """Add a CTF to the team's list. Members and admins only."""
    return await use_case.execute(
        CreateCtfRequest(
            token=token,
            team_id=team_id,
            name=request.name,
            description=request.description,
        )
    )


@router.get("", response_model=list[CtfView])
async def list_ctfs(
    team_id: UUID,
    use_case: FromDishka[ListCtfsUseCase],
    include_archived: bool = Query(default=False, alias="includeArchived"),
    token: str = Depends(bearer_token),
) -> list[CtfView]:
    """List the team's CTFs, oldest first.

    Archived CTFs are only included with ``includeArchived=true``.
    """
    return await use_case.execute(
        ListCtfsRequest(
            token=token, team_id=team_id, include_archived=include_archived
        )
    )


@router.get("/{ctf_id}", response_model=CtfView)
async def get_ctf(
    team_id: UUID,
    ctf_id: UUID,
    use_case: FromDishka[GetCtfUseCase],
    token: str = Depends(bearer_token),
) -> CtfView:
    """Get one of the team's CTFs."""
    return await use_case.execute(
        GetCtfRequest(token=token, team_id=team_id, ctf_id=ctf_id)
    )


@router.post("/{ctf_id}/archive", response_model=CtfView)
async def archive_ctf(
    team_id: UUID,
    ctf_id: UUID,
    use_case: FromDishka[SetCtfArchivedUseCase],
    token: str = Depends(bearer_token),
) -> CtfView:
    """Archive a CTF. Team owner or admin only."""
    return await use_case.execute(
        SetCtfArchivedRequest(
            token=token, team_id=team_id, ctf_id=ctf_id, archived=True
        )
    )


@router.post("/{ctf_id}/unarchive", response_model=CtfView)
async def unarchive_ctf(
    team_id: UUID,
    ctf_id: UUID,
    use_case: FromDishka[SetCtfArchivedUseCase],
    token: str = Depends(bearer_token),
) -> CtfView:
    """Bring a CTF back from the archive. Team owner or admin only."""
    return await use_case.execute(
        SetCtfArchivedRequest(
            token=token, team_id=team_id, ctf_id=ctf_id, archived=False
        )
    )
