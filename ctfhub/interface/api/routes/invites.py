"""Invite routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status

from ctfhub.application.usecase.invite import (
    DeleteInviteRequest,
    DeleteInviteUseCase,
    GetInviteRequest,
    GetInviteUseCase,
    UseInviteRequest,
    UseInviteUseCase,
)
from ctfhub.application.usecase.views import InviteBasicView, InviteView, TeamView
from ctfhub.interface.api.auth import bearer_token, optional_bearer_token

router = APIRouter(prefix="/invites", tags=["invites"], route_class=DishkaRoute)


@router.get("/{code}", response_model=InviteView | InviteBasicView)
async def get_invite(
    code: str,
    use_case: FromDishka[GetInviteUseCase],
    token: str | None = Depends(optional_bearer_token),
) -> InviteView | InviteBasicView:
    """Look up an invite by code.

    Authentication is optional. Admins get the full invite, including
    expired ones; everyone else gets the basic view of a usable invite.

    Args:
        code: Invite code
        use_case: Get invite use case from DI
        token: Bearer token, if any

    Returns:
        Full or basic invite
    """
    return await use_case.execute(GetInviteRequest(token=token, code=code))


@router.delete("/{code}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invite(
    code: str,
    use_case: FromDishka[DeleteInviteUseCase],
    token: str = Depends(bearer_token),
) -> None:
    """Revoke an invite. Team owner or admin only."""
    await use_case.execute(DeleteInviteRequest(token=token, code=code))


@router.post("/{code}/use", response_model=TeamView)
async def use_invite(
    code: str,
    use_case: FromDishka[UseInviteUseCase],
    token: str = Depends(bearer_token),
) -> TeamView:
    """Join the invite's team.

    Returns:
        The joined team
    """
    return await use_case.execute(UseInviteRequest(token=token, code=code))
