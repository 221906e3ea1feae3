"""Models package - DDL and entities for all domains."""

from app.models.clubs import (
    CLUB_DDL,
    CLUB_MEMBER_DDL,
    CLUB_MEMBER_SEQ_DDL,
    CLUB_POSITION_DDL,
    CLUB_POSITION_INDEXES,
    CLUB_POSITION_SEQ_DDL,
    CLUB_SEQ_DDL,
)
from app.models.common import ACTIVITY_DDL, ACTIVITY_SEQ_DDL, BaseEntity
from app.models.nominations import (
    NOMINATION_APPLICATION_DDL,
    NOMINATION_APPLICATION_SEQ_DDL,
    NOMINATION_DDL,
    NOMINATION_INDEXES,
    NOMINATION_SEQ_DDL,
)
from app.models.voting import (
    NOMINATION_WINNER_DDL,
    NOMINATION_WINNER_INDEXES,
    NOMINATION_WINNER_SEQ_DDL,
    VOTE_DDL,
    VOTE_INDEXES,
    VOTE_SEQ_DDL,
    VOTING_EVENT_DDL,
    VOTING_EVENT_INDEXES,
    VOTING_EVENT_SEQ_DDL,
)

ALL_DDL = [
    # Clubs
    CLUB_SEQ_DDL,
    CLUB_DDL,
    CLUB_POSITION_SEQ_DDL,
    CLUB_POSITION_DDL,
    *CLUB_POSITION_INDEXES,
    CLUB_MEMBER_SEQ_DDL,
    CLUB_MEMBER_DDL,
    # Nominations
    NOMINATION_SEQ_DDL,
    NOMINATION_DDL,
    *NOMINATION_INDEXES,
    NOMINATION_APPLICATION_SEQ_DDL,
    NOMINATION_APPLICATION_DDL,
    # Voting
    VOTING_EVENT_SEQ_DDL,
    VOTING_EVENT_DDL,
    *VOTING_EVENT_INDEXES,
    VOTE_SEQ_DDL,
    VOTE_DDL,
    *VOTE_INDEXES,
    NOMINATION_WINNER_SEQ_DDL,
    NOMINATION_WINNER_DDL,
    *NOMINATION_WINNER_INDEXES,
    # Common
    ACTIVITY_SEQ_DDL,
    ACTIVITY_DDL,
]

__all__ = [
    "BaseEntity",
    "ALL_DDL",
]
