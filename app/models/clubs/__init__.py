"""Club domain models - clubs, positions and membership."""

from app.models.clubs.club import CLUB_DDL, CLUB_SEQ_DDL
from app.models.clubs.entities import (
    Club,
    ClubMember,
    ClubPosition,
    ClubStatus,
    CurrentHolder,
    HolderSource,
    MemberStatus,
    PositionSpec,
)
from app.models.clubs.member import CLUB_MEMBER_DDL, CLUB_MEMBER_SEQ_DDL
from app.models.clubs.position import CLUB_POSITION_DDL, CLUB_POSITION_INDEXES, CLUB_POSITION_SEQ_DDL

__all__ = [
    "CLUB_SEQ_DDL",
    "CLUB_DDL",
    "CLUB_POSITION_SEQ_DDL",
    "CLUB_POSITION_DDL",
    "CLUB_POSITION_INDEXES",
    "CLUB_MEMBER_SEQ_DDL",
    "CLUB_MEMBER_DDL",
    "Club",
    "ClubMember",
    "ClubPosition",
    "ClubStatus",
    "CurrentHolder",
    "HolderSource",
    "MemberStatus",
    "PositionSpec",
]
