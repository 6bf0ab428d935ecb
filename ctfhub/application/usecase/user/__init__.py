"""User use cases."""

from ctfhub.application.usecase.user.get_user_details import (
    GetUserDetailsRequest,
    GetUserDetailsUseCase,
)
from ctfhub.application.usecase.user.update_user_details import (
    UpdateUserDetailsRequest,
    UpdateUserDetailsUseCase,
)

__all__ = [
    "GetUserDetailsRequest",
    "GetUserDetailsUseCase",
    "UpdateUserDetailsRequest",
    "UpdateUserDetailsUseCase",
]
