"""Voting domain models - voting events, votes, winners and tallies."""

from app.models.voting.entities import (
    FINISHED_EVENT_STATUSES,
    OPEN_EVENT_STATUSES,
    NominationWinner,
    PositionResult,
    TallyRow,
    Vote,
    VotingEvent,
    VotingEventStatus,
    VotingStats,
)
from app.models.voting.vote import VOTE_DDL, VOTE_INDEXES, VOTE_SEQ_DDL
from app.models.voting.voting_event import VOTING_EVENT_DDL, VOTING_EVENT_INDEXES, VOTING_EVENT_SEQ_DDL
from app.models.voting.winner import NOMINATION_WINNER_DDL, NOMINATION_WINNER_INDEXES, NOMINATION_WINNER_SEQ_DDL

__all__ = [
    "VOTING_EVENT_SEQ_DDL",
    "VOTING_EVENT_DDL",
    "VOTING_EVENT_INDEXES",
    "VOTE_SEQ_DDL",
    "VOTE_DDL",
    "VOTE_INDEXES",
    "NOMINATION_WINNER_SEQ_DDL",
    "NOMINATION_WINNER_DDL",
    "NOMINATION_WINNER_INDEXES",
    "FINISHED_EVENT_STATUSES",
    "OPEN_EVENT_STATUSES",
    "NominationWinner",
    "PositionResult",
    "TallyRow",
    "Vote",
    "VotingEvent",
    "VotingEventStatus",
    "VotingStats",
]
