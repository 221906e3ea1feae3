"""Clubs API."""

from web.api.clubs.views import (
    assign_position,
    create_club,
    get_club,
    get_current_holders,
    get_member_status,
    get_members,
    join_club,
    remove_member,
    replace_positions,
    set_member_status,
    update_club,
)

__all__ = [
    "get_club",
    "create_club",
    "update_club",
    "replace_positions",
    "get_current_holders",
    "get_members",
    "get_member_status",
    "join_club",
    "set_member_status",
    "assign_position",
    "remove_member",
]
