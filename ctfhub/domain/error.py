"""Domain layer errors.

Every error carries a machine-readable ``error_code`` plus an optional human
message and details. The interface layer maps error classes to HTTP status
codes; nothing here knows about HTTP.
"""

from typing import Any


class DomainError(Exception):
    """Base domain error."""

    default_code: str | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str | None = None,
        details: Any = None,
    ):
        self.message = message
        self.error_code = error_code or self.default_code
        self.details = details
        super().__init__(message or self.error_code or self.__class__.__name__)


class ValidationError(DomainError):
    """Domain validation error."""

    default_code = "error_validation"


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class AuthenticationError(DomainError):
    """Raised when the caller's identity cannot be established."""

    default_code = "error_unauthorized"


class MissingCredentialsError(AuthenticationError):
    """Raised when a request carries no bearer token."""

    def __init__(self):
        super().__init__("Missing authorization", error_code="error_unauthorized")


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token is malformed, expired or badly signed."""

    def __init__(self, reason: str):
        super().__init__(reason, error_code="error_invalid_token")


class AuthorizationError(DomainError):
    """Raised when the caller lacks the privilege for an operation."""

    default_code = "error_invalid_permissions"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f"{resource} not found: {identifier}",
            error_code=f"error_{resource.lower()}_not_found",
        )


class ConflictError(DomainError):
    """Raised when an operation conflicts with the current state."""

    default_code = "error_conflict"


class InvalidOwnershipTransferError(BusinessRuleViolationError):
    """Raised when a team ownership transfer is not allowed."""

    pass


class InviteExpiredError(BusinessRuleViolationError):
    """Raised when an invite is past its expiry or out of uses."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(
            f"Invite {code} is expired", error_code="error_expired_invite"
        )
