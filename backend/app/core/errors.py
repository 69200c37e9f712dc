"""API error types rendered as ``{"status": false, "message": ...}`` bodies."""

from __future__ import annotations

from fastapi import status


class ApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationFailed(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class Conflict(ApiError):
    # Duplicates are reported as a plain client error, not 409.
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Resource already exists"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Unauthorized(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class InternalError(ApiError):
    pass
