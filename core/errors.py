"""
Store exceptions.

Each exception carries the HTTP status the API layer answers with,
so handlers can convert store failures without a lookup table.
"""


class StoreError(Exception):
    """Base exception for store operations."""
    status_code = 500


class NotFoundError(StoreError):
    """No record has the requested identifier."""
    status_code = 404


class BadRequestError(StoreError):
    """A submitted form could not be accepted."""
    status_code = 400


class EmptyPasswordError(BadRequestError):
    """Password is empty after trimming whitespace."""

    def __init__(self, message: str = "The password can't be empty"):
        super().__init__(message)


class UsernameTakenError(BadRequestError):
    """Another user already has this username."""

    def __init__(self, message: str = "The username isn't available"):
        super().__init__(message)


class UnauthorizedError(StoreError):
    """The access-control gate denied the request."""
    status_code = 401


class StorageError(StoreError):
    """The external product store failed or is not configured."""
    status_code = 503
