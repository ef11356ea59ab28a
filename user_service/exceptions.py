"""Exception hierarchy for the user service.

Every error raised on purpose by the service derives from UserServiceError
and carries a human-readable message plus an optional details dict. The
Flask error handlers in main.py map each class to an HTTP status code.
"""


class UserServiceError(Exception):
    """Base class for all user service errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(UserServiceError):
    """Bad input shape or policy violation (weak password, phone prefix)."""


class AuthenticationError(UserServiceError):
    """Bad credentials, or a missing, invalid or expired token."""


class ResourceNotFound(UserServiceError):
    """Requested record does not exist."""


class ConflictError(UserServiceError):
    """Uniqueness violation, such as a phone number already registered."""


class InternalError(UserServiceError):
    """Unexpected storage or crypto failure."""
