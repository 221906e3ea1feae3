"""Club domain entities."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import StrEnum

from app.models.common import BaseEntity


class ClubStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


class MemberStatus(StrEnum):
    NONE = "none"
    PENDING = "pending"
    ACTIVE = "active"
    INACTIVE = "inactive"
    BANNED = "banned"


class HolderSource(StrEnum):
    ELECTION = "election"
    MANUAL = "manual"


@dataclass
class Club(BaseEntity):
    """Club with its join fee."""

    id: int
    name: str
    description: str | None
    status: str
    join_fee: Decimal
    created_at: datetime


@dataclass
class ClubPosition(BaseEntity):
    """Named seat a club elects or assigns members into."""

    id: int
    club_id: int
    name: str
    description: str | None
    is_active: bool
    created_at: datetime


@dataclass
class PositionSpec(BaseEntity):
    """Input row for a position list replacement."""

    name: str
    description: str | None = None
    is_active: bool = True


@dataclass
class ClubMember(BaseEntity):
    """Membership pivot row."""

    id: int
    club_id: int
    user_id: int
    status: str
    position_id: int | None
    joined_at: datetime


@dataclass
class CurrentHolder(BaseEntity):
    """Who currently holds an active position, and why."""

    position_id: int
    position_name: str
    user_id: int | None
    source: str | None
    voting_event_id: int | None = None
    votes_count: int | None = None
