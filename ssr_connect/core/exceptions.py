"""
Custom exceptions for the SSR Connect API.

Services raise these; the API layer renders them as ErrorSchema bodies
carrying a machine-readable code and a human message.
"""

from ninja import Schema


class ErrorSchema(Schema):
    """Standard error response schema."""

    code: str
    message: str
    details: dict | None = None


class APIException(Exception):
    """Base exception for API errors."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred."

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        details: dict | None = None,
    ):
        self.message = message or self.__class__.message
        self.code = code or self.__class__.code
        self.details = details
        super().__init__(self.message)

    def to_response(self) -> tuple[int, ErrorSchema]:
        """Convert exception to API response tuple."""
        return self.status_code, ErrorSchema(
            code=self.code,
            message=self.message,
            details=self.details,
        )


# Authentication Exceptions
class NotAuthenticatedError(APIException):
    """User is not authenticated."""

    status_code = 401
    code = "NOT_AUTHENTICATED"
    message = "Authentication required."


class InvalidCredentialsError(APIException):
    """Invalid login credentials."""

    status_code = 401
    code = "INVALID_CREDENTIALS"
    message = "Invalid email or password."


class AccountDisabledError(APIException):
    """User account cannot log in."""

    status_code = 401
    code = "ACCOUNT_DISABLED"
    message = "This account is not allowed to log in."


# Authorization Exceptions
class AuthorizationError(APIException):
    """Role or ownership mismatch."""

    status_code = 403
    code = "AUTHORIZATION_ERROR"
    message = "You do not have permission to perform this action."


# Resource Exceptions
class NotFoundError(APIException):
    """Resource not found."""

    status_code = 404
    code = "NOT_FOUND"
    message = "Resource not found."


class ConflictError(APIException):
    """Duplicate resource or a state that forbids the operation."""

    status_code = 409
    code = "CONFLICT"
    message = "The request conflicts with the current state."


# Validation Exceptions
class ValidationError(APIException):
    """Invalid input data."""

    status_code = 400
    code = "VALIDATION_ERROR"
    message = "Invalid data."


# File Exceptions
class FileTooLargeError(APIException):
    """File exceeds size limit."""

    status_code = 413
    code = "FILE_TOO_LARGE"
    message = "The file exceeds the maximum allowed size."


class InvalidFileTypeError(APIException):
    """File type not allowed."""

    status_code = 415
    code = "INVALID_FILE_TYPE"
    message = "This file type is not allowed."
