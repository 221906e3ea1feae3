"""Domain errors shared by repositories, services and the API layer."""


class ClubVoteError(Exception):
    """Base error with a machine-readable kind and a user-facing message."""

    kind = "error"

    def __init__(self, message: str = "Request failed"):
        self.message = message
        super().__init__(self.message)


class ValidationError(ClubVoteError):
    """Malformed input or an operation outside its allowed window."""

    kind = "validation"

    def __init__(self, message: str = "Validation error"):
        super().__init__(message)


class ConflictError(ClubVoteError):
    """Invariant violation: duplicate active record, duplicate vote, delete with dependents."""

    kind = "conflict"

    def __init__(self, message: str = "Conflict"):
        super().__init__(message)


class NotFoundError(ClubVoteError):
    """Referenced record does not exist."""

    kind = "not_found"

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)
