"""Clubs API response schemas."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel


class PositionItem(BaseModel):
    """Club position."""

    id: int
    name: str
    description: str | None
    is_active: bool


class ClubResponse(BaseModel):
    """Club with its positions."""

    id: int
    name: str
    description: str | None
    status: str
    join_fee: Decimal
    created_at: datetime
    positions: list[PositionItem]


class MemberItem(BaseModel):
    """Club member."""

    user_id: int
    status: str
    position_id: int | None
    joined_at: datetime


class MembersResponse(BaseModel):
    """Members of a club."""

    club_id: int
    items: list[MemberItem]
    counts: dict[str, int]


class MemberStatusResponse(BaseModel):
    """One user's standing in a club."""

    club_id: int
    user_id: int
    status: str


class HolderItem(BaseModel):
    """Current holder of a position."""

    position_id: int
    position_name: str
    user_id: int | None
    source: str | None
    voting_event_id: int | None
    votes_count: int | None


class HoldersResponse(BaseModel):
    """Current holders of a club's active positions."""

    club_id: int
    items: list[HolderItem]
