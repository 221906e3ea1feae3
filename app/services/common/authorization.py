"""Authorization collaborator - answers "may this actor do P"."""

from collections import defaultdict
from enum import StrEnum
from typing import Protocol

from loguru import logger


class Permission(StrEnum):
    CREATE_CLUBS = "create_clubs"
    EDIT_CLUBS = "edit_clubs"
    EDIT_CLUB_USERS = "edit_club_users"
    CREATE_NOMINATIONS = "create_nominations"
    EDIT_NOMINATIONS = "edit_nominations"
    DELETE_NOMINATIONS = "delete_nominations"
    EDIT_NOMINATION_APPLICATIONS = "edit_nomination_applications"
    CREATE_VOTING_EVENTS = "create_voting_events"
    EDIT_VOTING_EVENTS = "edit_voting_events"
    DELETE_VOTING_EVENTS = "delete_voting_events"
    VIEW_VOTING_EVENTS = "view_voting_events"


class Authorizer(Protocol):
    def can(self, actor_id: int, permission: str) -> bool: ...


class GrantAuthorizer:
    """In-memory permission grants; admin ids hold every permission."""

    def __init__(self, admin_ids: set[int] | None = None):
        self._admins = set(admin_ids or ())
        self._grants: dict[int, set[str]] = defaultdict(set)

    def grant(self, actor_id: int, *permissions: str) -> None:
        self._grants[actor_id].update(permissions)
        logger.debug("Granted {} to actor {}", sorted(permissions), actor_id)

    def revoke(self, actor_id: int, *permissions: str) -> None:
        self._grants[actor_id].difference_update(permissions)

    def can(self, actor_id: int, permission: str) -> bool:
        return actor_id in self._admins or permission in self._grants.get(actor_id, ())
