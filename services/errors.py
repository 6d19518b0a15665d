"""
services/errors.py

Domain errors raised by the service layer. The HTTP layer maps them to the
standard error envelope in middlewares/error_handler.py.
"""


class AppError(Exception):
    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Malformed or out-of-range input. Nothing has been written."""
    status_code = 400
    code = "VALIDATION_ERROR"


class NotFoundError(AppError):
    """Record missing, or owned by another user."""
    status_code = 404
    code = "NOT_FOUND"


class AuthError(AppError):
    status_code = 401
    code = "UNAUTHORIZED"


class ConflictError(AppError):
    status_code = 409
    code = "CONFLICT"
