"""Common repositories."""

from app.repositories.common.activity import ActivityRepository

__all__ = [
    "ActivityRepository",
]
