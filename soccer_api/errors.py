"""Domain errors raised by the service layer.

Each error carries the HTTP status it maps to; the exception handlers in
``main.py`` turn them into the response envelope.
"""


class AppError(Exception):
    status_code = 400

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    status_code = 400


class InvalidCredentials(AppError):
    status_code = 401


class InvalidToken(AppError):
    status_code = 401


class Forbidden(AppError):
    status_code = 403

    def __init__(self, message: str = "NOT_ALLOWED_ACCESS"):
        super().__init__(message)


class NotFound(AppError):
    status_code = 404


class DuplicateResource(AppError):
    status_code = 409


class InternalError(AppError):
    status_code = 500
