"""
Error taxonomy shared by services and controllers.

Guard failures (401/403) are rendered as bare status codes. Every other
ApiError is rendered as JSON ``{"error": ..., "details": ...}``.
"""
from typing import Optional

from fastapi import status


class AuthError(Exception):
    """Raised by the guard chain. Carries only a status code."""
    status_code: int = status.HTTP_401_UNAUTHORIZED

    def __init__(self, status_code: Optional[int] = None):
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.status_code)


class Unauthenticated(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidToken(AuthError):
    status_code = status.HTTP_403_FORBIDDEN


class Forbidden(AuthError):
    status_code = status.HTTP_403_FORBIDDEN


class ApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, error: str, details: Optional[str] = None, status_code: Optional[int] = None):
        self.error = error
        self.details = details
        if status_code is not None:
            self.status_code = status_code
        super().__init__(error)

    def to_dict(self) -> dict:
        body = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(ApiError):
    # Existing clients expect 400 for duplicates, not 409
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class InternalError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
