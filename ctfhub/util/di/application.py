"""Application layer DI providers."""

from dishka import Scope, provide

from ctfhub.application.usecase.ctf import (
    CreateCtfUseCase,
    GetCtfUseCase,
    ListCtfsUseCase,
    SetCtfArchivedUseCase,
)
from ctfhub.application.usecase.invite import (
    CreateInviteUseCase,
    DeleteInviteUseCase,
    GetInviteUseCase,
    UseInviteUseCase,
)
from ctfhub.application.usecase.team import (
    CreateTeamUseCase,
    DeleteTeamUseCase,
    GetTeamUseCase,
    LeaveTeamUseCase,
    UpdateOwnerUseCase,
    UpdateTeamUseCase,
)
from ctfhub.application.usecase.user import (
    GetUserDetailsUseCase,
    UpdateUserDetailsUseCase,
)
from ctfhub.domain.service import (
    CtfService,
    InviteService,
    JWTService,
    TeamService,
    UserService,
)
from ctfhub.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Team use cases
    @provide(scope=Scope.REQUEST)
    def get_create_team_use_case(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        user_service: UserService,
    ) -> CreateTeamUseCase:
        """Provide create team use case."""
        return CreateTeamUseCase(
            jwt_service=jwt_service,
            team_service=team_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_team_use_case(
        self, jwt_service: JWTService, team_service: TeamService
    ) -> GetTeamUseCase:
        """Provide get team use case."""
        return GetTeamUseCase(jwt_service=jwt_service, team_service=team_service)

    @provide(scope=Scope.REQUEST)
    def get_update_team_use_case(
        self, jwt_service: JWTService, team_service: TeamService
    ) -> UpdateTeamUseCase:
        """Provide update team use case."""
        return UpdateTeamUseCase(jwt_service=jwt_service, team_service=team_service)

    @provide(scope=Scope.REQUEST)
    def get_update_owner_use_case(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        user_service: UserService,
    ) -> UpdateOwnerUseCase:
        """Provide update owner use case."""
        return UpdateOwnerUseCase(
            jwt_service=jwt_service,
            team_service=team_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_leave_team_use_case(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        user_service: UserService,
    ) -> LeaveTeamUseCase:
        """Provide leave team use case."""
        return LeaveTeamUseCase(
            jwt_service=jwt_service,
            team_service=team_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_team_use_case(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        user_service: UserService,
        invite_service: InviteService,
        ctf_service: CtfService,
    ) -> DeleteTeamUseCase:
        """Provide delete team use case."""
        return DeleteTeamUseCase(
            jwt_service=jwt_service,
            team_service=team_service,
            user_service=user_service,
            invite_service=invite_service,
            ctf_service=ctf_service,
        )

    # Invite use cases
    @provide(scope=Scope.REQUEST)
    def get_create_invite_use_case(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        invite_service: InviteService,
    ) -> CreateInviteUseCase:
        """Provide create invite use case."""
        return CreateInviteUseCase(
            jwt_service=jwt_service,
            team_service=team_service,
            invite_service=invite_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_invite_use_case(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        invite_service: InviteService,
    ) -> GetInviteUseCase:
        """Provide get invite use case."""
        return GetInviteUseCase(
            jwt_service=jwt_service,
            team_service=team_service,
            invite_service=invite_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_invite_use_case(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        invite_service: InviteService,
    ) -> DeleteInviteUseCase:
        """Provide delete invite use case."""
        return DeleteInviteUseCase(
            jwt_service=jwt_service,
            team_service=team_service,
            invite_service=invite_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_use_invite_use_case(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        user_service: UserService,
        invite_service: InviteService,
    ) -> UseInviteUseCase:
        """Provide use invite use case."""
        return UseInviteUseCase(
            jwt_service=jwt_service,
            team_service=team_service,
            user_service=user_service,
            invite_service=invite_service,
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_user_details_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetUserDetailsUseCase:
        """Provide get user details use case."""
        return GetUserDetailsUseCase(jwt_service=jwt_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_details_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> UpdateUserDetailsUseCase:
        """Provide update user details use case."""
        return UpdateUserDetailsUseCase(
            jwt_service=jwt_service, user_service=user_service
        )

    # CTF use cases
    @provide(scope=Scope.REQUEST)
    def get_create_ctf_use_case(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        ctf_service: CtfService,
    ) -> CreateCtfUseCase:
        """Provide create CTF use case."""
        return CreateCtfUseCase(
            jwt_service=jwt_service, team_service=team_service, ctf_service=ctf_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_ctfs_use_case(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        ctf_service: CtfService,
    ) -> ListCtfsUseCase:
        """Provide list CTFs use case."""
        return ListCtfsUseCase(
            jwt_service=jwt_service, team_service=team_service, ctf_service=ctf_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_ctf_use_case(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        ctf_service: CtfService,
    ) -> GetCtfUseCase:
        """Provide get CTF use case."""
        return GetCtfUseCase(
            jwt_service=jwt_service, team_service=team_service, ctf_service=ctf_service
        )

    @provide(scope=Scope.REQUEST)
    def get_set_ctf_archived_use_case(
        self,
        jwt_service: JWTService,
        team_service: TeamService,
        ctf_service: CtfService,
    ) -> SetCtfArchivedUseCase:
        """Provide archive/unarchive CTF use case."""
        return SetCtfArchivedUseCase(
            jwt_service=jwt_service, team_service=team_service, ctf_service=ctf_service
        )
