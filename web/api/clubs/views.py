"""Clubs API views - thin layer over services."""

from app.container import container
from app.models.clubs import Club, ClubMember, MemberStatus
from app.services.common import Permission
from web.api.errors import require_permission

from .schemas import (
    ClubResponse,
    HolderItem,
    HoldersResponse,
    MemberItem,
    MembersResponse,
    MemberStatusResponse,
    PositionItem,
)


def _club_response(club: Club) -> ClubResponse:
    positions = container.catalog.positions(club.id)
    return ClubResponse(
        id=club.id,
        name=club.name,
        description=club.description,
        status=club.status,
        join_fee=club.join_fee,
        created_at=club.created_at,
        positions=[
            PositionItem(id=p.id, name=p.name, description=p.description, is_active=p.is_active)
            for p in positions
        ],
    )


def _member_item(member: ClubMember) -> MemberItem:
    return MemberItem(
        user_id=member.user_id,
        status=member.status,
        position_id=member.position_id,
        joined_at=member.joined_at,
    )


def get_club(club_id: int) -> ClubResponse:
    """Get a club with its positions."""
    return _club_response(container.catalog.get_club(club_id))


def create_club(
    actor_id: int,
    name: str,
    join_fee=0,
    positions: list | None = None,
    description: str | None = None,
) -> ClubResponse:
    """Create a club with its initial positions."""
    require_permission(actor_id, Permission.CREATE_CLUBS)
    club = container.catalog.create_club(
        name, join_fee=join_fee, positions=positions, description=description, actor_id=actor_id
    )
    return _club_response(club)


def update_club(
    actor_id: int,
    club_id: int,
    name: str | None = None,
    status: str | None = None,
    join_fee=None,
    description: str | None = None,
    positions: list | None = None,
) -> ClubResponse:
    """Update club details; a position list replaces the current one."""
    require_permission(actor_id, Permission.EDIT_CLUBS)
    club = container.catalog.update_club(
        club_id,
        name=name,
        status=status,
        join_fee=join_fee,
        description=description,
        positions=positions,
        actor_id=actor_id,
    )
    return _club_response(club)


def replace_positions(actor_id: int, club_id: int, positions: list) -> ClubResponse:
    """Replace the whole position list of a club."""
    require_permission(actor_id, Permission.EDIT_CLUBS)
    container.catalog.replace_positions(club_id, positions, actor_id=actor_id)
    return get_club(club_id)


def get_current_holders(club_id: int) -> HoldersResponse:
    """Get who holds each active position."""
    holders = container.catalog.current_holders(club_id)
    return HoldersResponse(club_id=club_id, items=[HolderItem(**h.to_dict()) for h in holders])


def get_members(club_id: int, status: str | None = None) -> MembersResponse:
    """Get the members of a club."""
    members = container.membership.members(club_id, status)
    return MembersResponse(
        club_id=club_id,
        items=[_member_item(m) for m in members],
        counts=container.membership.counts_by_status(club_id),
    )


def get_member_status(club_id: int, user_id: int) -> MemberStatusResponse:
    """Get one user's standing in a club."""
    status = container.membership.status_of(club_id, user_id)
    return MemberStatusResponse(club_id=club_id, user_id=user_id, status=status)


def join_club(actor_id: int, club_id: int) -> MemberItem:
    """Request membership for the acting user."""
    return _member_item(container.membership.join(club_id, actor_id, MemberStatus.PENDING))


def set_member_status(actor_id: int, club_id: int, user_id: int, status: str) -> MemberItem:
    """Approve, deactivate or ban a member."""
    require_permission(actor_id, Permission.EDIT_CLUB_USERS)
    return _member_item(container.membership.set_status(club_id, user_id, status, actor_id=actor_id))


def assign_position(actor_id: int, club_id: int, user_id: int, position_id: int | None) -> MemberItem:
    """Manually seat a member, or clear the seat with None."""
    require_permission(actor_id, Permission.EDIT_CLUB_USERS)
    return _member_item(container.membership.assign_position(club_id, user_id, position_id, actor_id=actor_id))


def remove_member(actor_id: int, club_id: int, user_id: int) -> None:
    """Remove a member from a club."""
    require_permission(actor_id, Permission.EDIT_CLUB_USERS)
    container.membership.remove_member(club_id, user_id, actor_id=actor_id)
