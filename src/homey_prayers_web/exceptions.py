"""HTTP exceptions raised by controllers and rendered by the error middleware."""

from fastapi import status


class HttpException(Exception):
    """Base class for errors that map to an HTTP response."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status = status_code
        self.message = message


class NotFoundException(HttpException):
    """Requested resource does not exist."""

    def __init__(self, resource: str) -> None:
        super().__init__(status.HTTP_404_NOT_FOUND, f"{resource} not found")


class WrongCredentialsException(HttpException):
    def __init__(self) -> None:
        super().__init__(status.HTTP_401_UNAUTHORIZED, "Wrong credentials provided")


class AuthenticationTokenMissingException(HttpException):
    def __init__(self) -> None:
        super().__init__(status.HTTP_401_UNAUTHORIZED, "Authentication token missing")


class WrongAuthenticationTokenException(HttpException):
    def __init__(self) -> None:
        super().__init__(status.HTTP_401_UNAUTHORIZED, "Wrong authentication token")
