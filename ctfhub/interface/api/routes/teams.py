"""Team routes."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import Field

from ctfhub.application.usecase.base import ApiModel
from ctfhub.application.usecase.invite import (
    CreateInviteRequest,
    CreateInviteUseCase,
)
from ctfhub.application.usecase.team import (
    CreateTeamRequest,
    CreateTeamResponse,
    CreateTeamUseCase,
    DeleteTeamRequest,
    DeleteTeamUseCase,
    GetTeamRequest,
    GetTeamUseCase,
    LeaveTeamRequest,
    LeaveTeamUseCase,
    UpdateOwnerRequest,
    UpdateOwnerUseCase,
    UpdateTeamRequest,
    UpdateTeamUseCase,
)
from ctfhub.application.usecase.views import InviteView, TeamView
from ctfhub.interface.api.auth import bearer_token

router = APIRouter(prefix="/teams", tags=["teams"], route_class=DishkaRoute)


class CreateTeamAPIRequest(ApiModel):
    """API request for creating a team."""

    team_name: str = Field(min_length=1, max_length=64)


class SocialsPatch(ApiModel):
    """Social links to change."""

    twitter: str | None = None
    website: str | None = None


class UpdateTeamAPIRequest(ApiModel):
    """API request for a partial team update."""

    name: str | None = Field(default=None, min_length=1, max_length=64)
    socials: SocialsPatch | None = None


class UpdateOwnerAPIRequest(ApiModel):
    """API request for transferring ownership."""

    new_owner_id: UUID = Field(alias="newOwnerID")


class CreateInviteAPIRequest(ApiModel):
    """API request for creating an invite."""

    expiry: datetime | None = None
    max_uses: int | None = None


@router.post(
    "", response_model=CreateTeamResponse, status_code=status.HTTP_201_CREATED
)
async def create_team(
    request: CreateTeamAPIRequest,
    use_case: FromDishka[CreateTeamUseCase],
    token: str = Depends(bearer_token),
) -> CreateTeamResponse:
    """Create a team owned by the caller.

    Args:
        request: Team name
        use_case: Create team use case from DI
        token: Bearer token

    Returns:
        Normalized team name and team ID
    """
    return await use_case.execute(
        CreateTeamRequest(token=token, team_name=request.team_name)
    )


@router.get("/{team_id}", response_model=TeamView)
async def get_team(
    team_id: UUID,
    use_case: FromDishka[GetTeamUseCase],
    token: str = Depends(bearer_token),
) -> TeamView:
    """Get a team. Members and admins only."""
    return await use_case.execute(GetTeamRequest(token=token, team_id=team_id))


@router.patch("/{team_id}", response_model=TeamView)
async def update_team(
    team_id: UUID,
    request: UpdateTeamAPIRequest,
    use_case: FromDishka[UpdateTeamUseCase],
    token: str = Depends(bearer_token),
) -> TeamView:
    """Update a team's name and social links.

    Only fields present in the body change.
    """
    socials = request.socials or SocialsPatch()
    return await use_case.execute(
        UpdateTeamRequest(
            token=token,
            team_id=team_id,
            name=request.name,
            twitter=socials.twitter,
            website=socials.website,
        )
    )


@router.put("/{team_id}/owner", response_model=TeamView)
async def update_owner(
    team_id: UUID,
    request: UpdateOwnerAPIRequest,
    use_case: FromDishka[UpdateOwnerUseCase],
    token: str = Depends(bearer_token),
) -> TeamView:
    """Transfer ownership of a team.

    Non-admin callers must be the owner, and the new owner must already be
    a member.
    """
    return await use_case.execute(
        UpdateOwnerRequest(
            token=token, team_id=team_id, new_owner_id=request.new_owner_id
        )
    )


@router.post(
    "/{team_id}/invites",
    response_model=InviteView,
    status_code=status.HTTP_201_CREATED,
)
async def create_invite(
    team_id: UUID,
    use_case: FromDishka[CreateInviteUseCase],
    request: CreateInviteAPIRequest | None = None,
    token: str = Depends(bearer_token),
) -> InviteView:
    """Create an invite code for a team.

    The body is optional; without it the invite never expires and has no
    use limit.
    """
    request = request or CreateInviteAPIRequest()
    return await use_case.execute(
        CreateInviteRequest(
            token=token,
            team_id=team_id,
            expiry=request.expiry,
            max_uses=request.max_uses,
        )
    )


@router.post("/{team_id}/leave", status_code=status.HTTP_204_NO_CONTENT)
async def leave_team(
    team_id: UUID,
    use_case: FromDishka[LeaveTeamUseCase],
    token: str = Depends(bearer_token),
) -> None:
    """Leave a team. The owner must transfer ownership first."""
    await use_case.execute(LeaveTeamRequest(token=token, team_id=team_id))


@router.delete("/{team_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_team(
    team_id: UUID,
    use_case: FromDishka[DeleteTeamUseCase],
    token: str = Depends(bearer_token),
) -> None:
    """Delete a team with its invites and CTFs."""
    await use_case.execute(DeleteTeamRequest(token=token, team_id=team_id))
