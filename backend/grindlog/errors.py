"""
Service-level error taxonomy.

Every error carries a human-readable message and a stable `kind` tag. The
FastAPI app renders them as:

    {"error": "<message>", "kind": "<kind>"}

with the status code attached to the class. Services raise these directly;
routes never build error responses by hand.
"""

from fastapi import status


class GrindlogError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    kind: str = "internal_error"
    default_message: str = "An internal error occurred."

    def __init__(self, message: str | None = None, *, headers: dict[str, str] | None = None) -> None:
        self.message = message or self.default_message
        self.headers = headers
        super().__init__(self.message)


class UnauthorizedError(GrindlogError):
    """Missing, invalid or expired credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    kind = "unauthorized"
    default_message = "Unauthorized"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class ValidationError(GrindlogError):
    """A required field is missing or a value is out of range."""

    status_code = status.HTTP_400_BAD_REQUEST
    kind = "validation_error"
    default_message = "Invalid request"


class NotFoundError(GrindlogError):
    """The referenced resource does not exist for this owner."""

    status_code = status.HTTP_404_NOT_FOUND
    kind = "not_found"
    default_message = "Resource not found"


class ConflictError(GrindlogError):
    """A concurrent write collided with this one. Re-fetch and retry."""

    status_code = status.HTTP_409_CONFLICT
    kind = "conflict"
    default_message = "The resource was modified concurrently. Please retry."


class StoreUnavailableError(GrindlogError):
    """The database could not be reached or rejected the write."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    kind = "store_unavailable"
    default_message = "The data store is temporarily unavailable. Please retry."
