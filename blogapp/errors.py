# blogapp/errors.py
"""
Error taxonomy shared by the handlers and the HTTP layer.

Handlers raise these and the pipeline turns them into a failed ``Result``;
routes pick the status code from ``ErrorKind``.
"""
from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    VALIDATION = "validation"
    DOMAIN = "domain"
    INTERNAL = "internal"


STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 400,
    ErrorKind.VALIDATION: 400,
    ErrorKind.DOMAIN: 400,
    ErrorKind.INTERNAL: 500,
}

GENERIC_ERROR_MESSAGE = "An error occurred while processing your request."


class AppError(Exception):
    kind = ErrorKind.DOMAIN

    def __init__(self, message, errors=None):
        super().__init__(message)
        self.message = message
        self.errors = list(errors) if errors else [message]


class DomainError(AppError):
    kind = ErrorKind.DOMAIN


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND


class ValidationError(AppError):
    kind = ErrorKind.VALIDATION

    def __init__(self, errors):
        errors = list(errors)
        super().__init__(", ".join(errors), errors)


class AuthError(AppError):
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_TOKEN = "invalid_token"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"

    def __init__(self, reason, message=None):
        self.reason = reason
        super().__init__(message or _AUTH_MESSAGES[reason])

    @property
    def kind(self):
        if self.reason == self.FORBIDDEN:
            return ErrorKind.FORBIDDEN
        return ErrorKind.UNAUTHORIZED


_AUTH_MESSAGES = {
    AuthError.INVALID_CREDENTIALS: "Invalid credentials",
    AuthError.INVALID_TOKEN: "Invalid or expired token",
    AuthError.UNAUTHORIZED: "User not authenticated",
    AuthError.FORBIDDEN: "You are not authorized to perform this action",
}
