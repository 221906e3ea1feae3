"""API errors and permission helpers."""

from app.container import container
from app.errors import ClubVoteError, ConflictError, NotFoundError, ValidationError


class PermissionDeniedError(ClubVoteError):
    """Actor lacks the permission an operation requires."""

    kind = "forbidden"

    def __init__(self, message: str = "You do not have permission to perform this action."):
        super().__init__(message)


def require_permission(actor_id: int, permission: str) -> None:
    """Raise unless the actor holds the permission."""
    if not container.authorizer.can(actor_id, permission):
        raise PermissionDeniedError()


def error_payload(error: ClubVoteError) -> dict:
    """Machine-readable kind plus the user-facing message."""
    return {"kind": error.kind, "message": error.message}


__all__ = [
    "ClubVoteError",
    "ConflictError",
    "NotFoundError",
    "PermissionDeniedError",
    "ValidationError",
    "error_payload",
    "require_permission",
]
