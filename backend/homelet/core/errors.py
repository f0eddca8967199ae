"""Domain error taxonomy.

Raised by the CRUD and service layers; ``homelet.main`` turns them into
JSON responses of the form ``{"detail": ..., "code": ...}``.
"""
from fastapi import status


class HomeletError(Exception):
    """Base exception for all domain errors."""

    code = "error"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class UnauthorizedError(HomeletError):
    """No identity, or the identity could not be verified."""

    code = "unauthorized"
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(HomeletError):
    """Authenticated, but not allowed to do this."""

    code = "forbidden"
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(HomeletError):
    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class InvalidInputError(HomeletError):
    """Malformed request values, e.g. end date not after start date."""

    code = "invalid_input"
    status_code = status.HTTP_400_BAD_REQUEST


class InvalidStateError(HomeletError):
    """The resource is not in a state that allows the operation."""

    code = "invalid_state"
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(HomeletError):
    code = "conflict"
    status_code = status.HTTP_409_CONFLICT
