"""Errors raised outside the domain layer."""


class UtilError(Exception):
    """Base utility error."""


class ConfigurationError(UtilError):
    """Settings that cannot be used to start the service.

    ``create_app`` checks the settings before serving anything, so this
    stops startup, for example when production still carries the
    placeholder JWT secret.
    """
