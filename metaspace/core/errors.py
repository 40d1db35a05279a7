"""Domain errors raised by services and rendered by the API exception handlers."""

from fastapi import status


class MetaspaceError(Exception):
    """Base class for errors that map to a client-facing HTTP status."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(MetaspaceError):
    """Raised when input is missing, empty, or references something that does not exist."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(MetaspaceError):
    """Raised when a username is already taken."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(MetaspaceError):
    """Raised when the caller cannot be authenticated."""

    status_code = status.HTTP_403_FORBIDDEN


class InvalidCredentialsError(AuthenticationError):
    """Unknown username or wrong password; the two are deliberately indistinguishable."""

    def __init__(self, message: str = "Invalid username or password.") -> None:
        super().__init__(message)


class MissingCredentialError(AuthenticationError):
    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message)


class ForbiddenError(MetaspaceError):
    """Raised when an authenticated caller lacks the role an operation requires."""

    status_code = status.HTTP_403_FORBIDDEN
