"""Typed application errors rendered as ``{"message": ...}`` at the API boundary."""

from fastapi import status


class AppError(Exception):
    """Base error carrying an HTTP status code and a user-facing message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Something went wrong!"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AppError):
    """A write was rejected by field validation or a uniqueness check."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input data!"

    def __init__(self, errors: dict[str, str] | str):
        if isinstance(errors, str):
            errors = {"__all__": errors}
        self.errors = errors
        super().__init__(" ".join(errors.values()))


class UnauthenticatedRequest(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Please provide email and password!"


class InvalidCredentials(AppError):
    """Sign-in or password check failed; callers say which part was wrong."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "You are not logged in! Please log in to get access."


class InvalidTokenError(UnauthorizedError):
    default_message = "Invalid token!"


class ExpiredTokenError(UnauthorizedError):
    default_message = "Token has been expired!"


class ConfigurationError(AppError):
    """The server cannot issue sessions, e.g. the signing secret is missing."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = "Cannot create access token!"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found!"
