class DomainError(Exception):
    """Base exception for business rule violations.

    `status_code` is the HTTP status the API answers with.
    """

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""

    status_code = 400


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid or no session exists."""

    status_code = 401


class NotFoundError(DomainError):
    """Raised when a record id does not exist."""

    status_code = 404


class ConflictError(DomainError):
    """Raised when a unique key is already taken."""

    status_code = 409


class StoreError(DomainError):
    """Raised when the underlying database fails."""

    status_code = 500
