"""Service-level errors, translated to HTTP status codes at the API boundary."""

from fastapi import status


class ServiceError(Exception):
    """Base error raised by service functions; carries a client-safe message."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationFailedError(ServiceError):
    """Client-supplied data violates a constraint the schema cannot express."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ServiceError):
    """Referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class UnauthorizedError(ServiceError):
    """Missing, invalid or expired access token."""

    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(ServiceError):
    """Authenticated, but the role does not allow the operation."""

    status_code = status.HTTP_403_FORBIDDEN


class InvalidCredentialsError(ServiceError):
    """Login failed. Same message for unknown user and wrong password."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self) -> None:
        super().__init__("Invalid username or password.")
