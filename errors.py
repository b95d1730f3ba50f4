"""Application errors shared by the usecase and HTTP layers."""

from enum import Enum
from typing import Any, Optional

from fastapi import status


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class AppError(Exception):
    """Base error carrying a classification and a client-facing message.

    Args:
        message: Text written to the response body.
        status_code: Optional override of the status implied by ``kind``.
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self._status_code = status_code

    @property
    def status_code(self) -> int:
        if self._status_code is not None:
            return self._status_code
        return STATUS_BY_KIND[self.kind]

    @property
    def is_client_error(self) -> bool:
        return self.kind is not ErrorKind.INTERNAL


class BadRequestError(AppError):
    kind = ErrorKind.BAD_REQUEST


class InvalidPayloadError(BadRequestError):
    """Raised when a decoded payload fails entity validation.

    Args:
        errors: The failed field checks.
        data: The rejected payload, echoed back to the client.
    """

    def __init__(self, errors: list[Any], data: Any = None, message: str = "invalid request body") -> None:
        super().__init__(message)
        self.errors = errors
        self.data = data


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, identifier: int) -> None:
        super().__init__(f"{entity.capitalize()} with id {identifier} not found")
        self.entity = entity
        self.identifier = identifier


class ConflictError(AppError):
    kind = ErrorKind.CONFLICT


class InternalError(AppError):
    kind = ErrorKind.INTERNAL
