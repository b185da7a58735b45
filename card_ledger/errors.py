"""
Typed error taxonomy shared by the services and both transports.

Services raise these errors; each transport translates them exactly once at
its boundary, using the kind carried by the error rather than its message.
"""
import enum
from dataclasses import dataclass
from typing import Any, Optional

import pydantic
from fastapi.exceptions import RequestValidationError

GENERIC_ERROR_MESSAGE = "Internal server error"
INVALID_REQUEST_MESSAGE = "Invalid request data"


class ErrorKind(str, enum.Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class AppError(Exception):
    """Base class for every error a service raises on purpose"""
    kind = ErrorKind.INTERNAL

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(AppError):
    """Malformed or out-of-range input, at schema or business-rule level"""
    kind = ErrorKind.VALIDATION


class NotFoundError(AppError):
    """A referenced entity does not exist"""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource_name: str, details: Optional[Any] = None):
        super().__init__(f"{resource_name} not found", details)
        self.resource_name = resource_name


class ConflictError(AppError):
    """A uniqueness rule would be violated"""
    kind = ErrorKind.CONFLICT


class InternalError(AppError):
    kind = ErrorKind.INTERNAL


@dataclass(frozen=True)
class ErrorDescription:
    kind: ErrorKind
    message: str
    details: Optional[Any] = None


def schema_issues(errors: list) -> list:
    """Structured issue list for a schema failure, safe to send to clients"""
    return [
        {
            "path": list(error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in errors
    ]


def describe_error(exc: BaseException) -> ErrorDescription:
    """Classify any exception into the taxonomy.

    Internal errors never carry the original message or details, so nothing
    about the failure leaks to the caller.
    """
    if isinstance(exc, AppError):
        if exc.kind is ErrorKind.INTERNAL:
            return ErrorDescription(ErrorKind.INTERNAL, GENERIC_ERROR_MESSAGE)
        return ErrorDescription(exc.kind, exc.message, exc.details)

    if isinstance(exc, (pydantic.ValidationError, RequestValidationError)):
        return ErrorDescription(ErrorKind.VALIDATION, INVALID_REQUEST_MESSAGE, schema_issues(exc.errors()))

    return ErrorDescription(ErrorKind.INTERNAL, GENERIC_ERROR_MESSAGE)
