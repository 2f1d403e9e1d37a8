# services/errors.py
"""
Errors raised by the product service.

Each error carries the RPC status code the caller receives. The service layer
raises them; the HTTP layer (routers/errors.py) turns them into responses.
"""
from enum import Enum


class StatusCode(str, Enum):
    UNIMPLEMENTED = "UNIMPLEMENTED"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"
    UNKNOWN = "UNKNOWN"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS = {
    StatusCode.UNIMPLEMENTED: 501,
    StatusCode.INVALID_ARGUMENT: 400,
    StatusCode.NOT_FOUND: 404,
    StatusCode.UNKNOWN: 500,
}


class ServiceError(Exception):
    code = StatusCode.UNKNOWN

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class VersionMismatch(ServiceError):
    """The caller asked for an API version this server does not implement."""
    code = StatusCode.UNIMPLEMENTED


class InvalidTimestamp(ServiceError):
    code = StatusCode.INVALID_ARGUMENT


class NotFound(ServiceError):
    code = StatusCode.NOT_FOUND


class DuplicateIntegrityViolation(ServiceError):
    """More than one row matched an id that should be unique."""
    code = StatusCode.UNKNOWN


class StorageFailure(ServiceError):
    code = StatusCode.UNKNOWN
