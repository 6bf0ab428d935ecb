"""Persistence layer errors."""


class PersistenceError(Exception):
    """Base persistence error.

    Raised when the database rejects or fails a statement for reasons the
    domain cannot act on (lost connection, timeout, unexpected constraint).
    """

    pass
