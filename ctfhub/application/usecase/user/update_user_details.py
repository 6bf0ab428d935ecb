"""Update user details use case."""

import logfire
from pydantic import BaseModel

from ctfhub.application.usecase.base import BaseUseCase
from ctfhub.domain.service import JWTService, UserService
from ctfhub.domain.value import Username


class UpdateUserDetailsRequest(BaseModel):
    """Update user details request."""

    token: str
    username: str | None = None
    email: str | None = None


class UpdateUserDetailsUseCase(BaseUseCase):
    """Use case for the caller editing their own details."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: UpdateUserDetailsRequest) -> None:
        identity = self.jwt_service.authenticate(request.token)
        username = Username(request.username) if request.username is not None else None

        with logfire.span("update_user_details", user_id=str(identity.user_id)):
            user = await self.user_service.get_by_id(identity.user_id, for_update=True)
            await self.user_service.update_details(
                user, username=username, email=request.email
            )
