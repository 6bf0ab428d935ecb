"""User routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import Field

from ctfhub.application.usecase.base import ApiModel
from ctfhub.application.usecase.user import (
    GetUserDetailsRequest,
    GetUserDetailsUseCase,
    UpdateUserDetailsRequest,
    UpdateUserDetailsUseCase,
)
from ctfhub.application.usecase.views import PublicUserView, UserView
from ctfhub.interface.api.auth import bearer_token

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserAPIRequest(ApiModel):
    """API request for updating the caller's details."""

    username: str | None = Field(default=None, min_length=1, max_length=64)
    email: str | None = Field(default=None, max_length=255)


@router.get("", response_model=UserView)
async def get_own_details(
    use_case: FromDishka[GetUserDetailsUseCase],
    token: str = Depends(bearer_token),
) -> UserView | PublicUserView:
    """Get the caller's own details."""
    return await use_case.execute(GetUserDetailsRequest(token=token))


@router.get("/{user_id}", response_model=UserView | PublicUserView)
async def get_user_details(
    user_id: UUID,
    use_case: FromDishka[GetUserDetailsUseCase],
    token: str = Depends(bearer_token),
) -> UserView | PublicUserView:
    """Get a user's details.

    The caller and admins see the full record; other users only see the
    public view.
    """
    return await use_case.execute(GetUserDetailsRequest(token=token, user_id=user_id))


@router.patch("", status_code=status.HTTP_204_NO_CONTENT)
async def update_user_details(
    request: UpdateUserAPIRequest,
    use_case: FromDishka[UpdateUserDetailsUseCase],
    token: str = Depends(bearer_token),
) -> None:
    """Update the caller's username and email."""
    await use_case.execute(
        UpdateUserDetailsRequest(
            token=token, username=request.username, email=request.email
        )
    )
