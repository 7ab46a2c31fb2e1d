# app/domain/exceptions.py
from http import HTTPStatus


class AppError(Exception):
    """
    Bazowy blad domenowy.
    Niesie status HTTP i komunikat, ktory handler zamienia na {"status", "message"}.
    """

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"status": int(self.status_code), "message": self.message}


class BadRequestError(AppError):
    status_code = HTTPStatus.BAD_REQUEST


class UnauthenticatedError(AppError):
    status_code = HTTPStatus.UNAUTHORIZED


class ForbiddenError(AppError):
    status_code = HTTPStatus.FORBIDDEN


class InvalidCredentialError(ForbiddenError):
    """Token z niepoprawnym podpisem, uszkodzony albo wygasly."""


class NotFoundError(AppError):
    status_code = HTTPStatus.NOT_FOUND


class ConflictError(AppError):
    status_code = HTTPStatus.CONFLICT


class ConcurrentModificationError(ConflictError):
    def __init__(self):
        super().__init__("Concurrent modification of the user, retry the request")
