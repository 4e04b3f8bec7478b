"""
Application error hierarchy.

Each error carries the HTTP status it maps to; the handlers registered in
main.py turn them into ``{"detail": message}`` responses.
"""


class JoblyError(Exception):
    """Base class for errors raised by the model and helper layers."""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
        self.message = message


class BadRequestError(JoblyError):
    """Client sent data that cannot be processed (400)."""
    status_code = 400

    def __init__(self, message: str = "Bad request"):
        super().__init__(message)


class EmptyUpdateError(BadRequestError):
    """A partial update was requested with no fields."""

    def __init__(self, message: str = "No data"):
        super().__init__(message)


class InvalidRangeError(BadRequestError):
    """minEmployees is greater than maxEmployees."""

    def __init__(self, message: str = "minEmployees is greater than maxEmployees"):
        super().__init__(message)


class UnknownFilterError(BadRequestError):
    """A search filter key outside the recognized vocabulary."""
    pass


class NotFoundError(JoblyError):
    """Requested record does not exist (404)."""
    status_code = 404

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class UnauthorizedError(JoblyError):
    """Caller is not allowed to perform the operation (401)."""
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)
