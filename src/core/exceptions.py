"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_USER = "INVALID_USER"

    # Not found errors (404)
    ARGUMENT_NOT_FOUND = "ARGUMENT_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Validation errors (400)
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Upstream errors (504)
    CATALOG_TIMEOUT = "CATALOG_TIMEOUT"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(
            error_code=ErrorCode.UNAUTHORIZED,
            message=message,
            status_code=401,
        )


class InvalidArgumentError(AppException):
    """Caller-supplied data failed a structural or business-rule check."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(
            error_code=ErrorCode.INVALID_ARGUMENT,
            message=f"Invalid argument: {detail}",
            status_code=400,
            details={"argument": detail},
        )


class ArgumentNotFoundError(AppException):
    """A referenced entity (group, movie, page) does not exist."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(
            error_code=ErrorCode.ARGUMENT_NOT_FOUND,
            message=f"Argument not found: {detail}",
            status_code=404,
            details={"argument": detail},
        )


class InvalidUserError(AppException):
    """The caller is not allowed to act on the targeted resource."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(
            error_code=ErrorCode.INVALID_USER,
            message=f"Invalid user: {detail}",
            status_code=401,
            details={"argument": detail},
        )


class UserNotFoundError(AppException):
    """The supplied token does not resolve to any user."""

    def __init__(self, token: str) -> None:
        self.detail = token
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message=f"User not found: {token}",
            status_code=404,
        )


class CatalogTimeoutError(AppException):
    """The movie catalog did not answer in time. Safe to retry."""

    def __init__(self, resource: str) -> None:
        self.detail = resource
        self.retryable = True
        super().__init__(
            error_code=ErrorCode.CATALOG_TIMEOUT,
            message="Movie catalog timed out",
            status_code=504,
            details={"resource": resource, "retryable": True},
        )


class InternalError(AppException):
    """Infrastructure failure (storage I/O, upstream protocol errors)."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(
            error_code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {detail}",
            status_code=500,
        )
