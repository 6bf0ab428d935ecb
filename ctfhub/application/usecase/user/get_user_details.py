"""Get user details use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from ctfhub.application.usecase.base import BaseUseCase
from ctfhub.application.usecase.views import PublicUserView, UserView
from ctfhub.domain.service import JWTService, UserService
from ctfhub.domain.value import UserId


class GetUserDetailsRequest(BaseModel):
    """Get user details request.

    Omitting ``user_id`` means "the caller".
    """

    token: str
    user_id: UUID | None = None


class GetUserDetailsUseCase(BaseUseCase):
    """Use case for reading a user's details."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get user details use case.

        Args:
            jwt_service: JWT service for token verification
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(
        self, request: GetUserDetailsRequest
    ) -> UserView | PublicUserView:
        """Execute get user details flow.

        Callers see their own full record; admins see anyone's. Other users
        only get the public view.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        identity = self.jwt_service.authenticate(request.token)
        user_id = UserId(request.user_id) if request.user_id else identity.user_id

        with logfire.span(
            "get_user_details",
            user_id=str(user_id),
            caller_id=str(identity.user_id),
        ):
            user = await self.user_service.get_by_id(user_id)

            if identity.is_admin or user.id == identity.user_id:
                return UserView.from_domain(user)
            return PublicUserView(id=str(user.id), username=user.username.root)
