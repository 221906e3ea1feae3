"""Collaborator services and helpers shared by all domains."""

from app.services.common.activity import ActivityLog
from app.services.common.authorization import Authorizer, GrantAuthorizer, Permission
from app.services.common.validation import validate_window

__all__ = [
    "ActivityLog",
    "Authorizer",
    "GrantAuthorizer",
    "Permission",
    "validate_window",
]
