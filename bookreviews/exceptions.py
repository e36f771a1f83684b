"""
Custom exception hierarchy for consistent error responses.

Usage:
    from bookreviews.exceptions import NotFoundError, ForbiddenError, ConflictError

    raise NotFoundError("Book", isbn)
    raise ForbiddenError("User not logged in")
    raise ConflictError("User already exists!")
    raise ValidationError("Username and password are required")

These exceptions are caught by the handler registered in main.py and
converted to JSON error responses with the shape:
    {"message": "<message>"}
"""

from fastapi import HTTPException, status


class AppError(HTTPException):
    """Base application error with a default status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            status_code=self.__class__.status_code,
            detail=message,
        )
        self.message = message
        self.extra_detail = detail


class NotFoundError(AppError):
    """Resource not found (404)."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, resource_id: int | str | None = None):
        if resource_id is not None:
            message = f"{resource} not found (id={resource_id})"
        else:
            message = f"{resource} not found"
        super().__init__(message)


class ReviewNotFoundError(NotFoundError):
    """The caller has no review on the book (404)."""

    def __init__(self):
        AppError.__init__(self, "Review not found for this user")


class ForbiddenError(AppError):
    """Not logged in, or the session token failed verification (403)."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "User not authenticated"):
        super().__init__(message)


class UnauthorizedError(AppError):
    """Bad credentials or no bound identity (401)."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class ConflictError(AppError):
    """Resource already exists (400, as the registration contract demands)."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)


class ValidationError(AppError):
    """Validation error (400)."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
