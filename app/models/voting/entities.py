"""Voting domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from app.models.common import BaseEntity


class VotingEventStatus(StrEnum):
    DRAFT = "draft"
    ACTIVE = "active"
    CLOSED = "closed"
    ARCHIVED = "archived"


OPEN_EVENT_STATUSES = (VotingEventStatus.ACTIVE, VotingEventStatus.DRAFT)
FINISHED_EVENT_STATUSES = (VotingEventStatus.CLOSED, VotingEventStatus.ARCHIVED)


@dataclass
class VotingEvent(BaseEntity):
    """Time-boxed election for a club."""

    id: int
    club_id: int
    nomination_id: int | None
    title: str
    description: str | None
    start_date: datetime
    end_date: datetime
    status: str
    closed_at: datetime | None
    created_at: datetime

    def is_open_at(self, moment: datetime) -> bool:
        """Active and inside [start_date, end_date]."""
        return self.status == VotingEventStatus.ACTIVE and self.start_date <= moment <= self.end_date


@dataclass
class Vote(BaseEntity):
    """One voter's choice for one position."""

    id: int
    voting_event_id: int
    nomination_application_id: int
    club_position_id: int
    user_id: int
    created_at: datetime


@dataclass
class NominationWinner(BaseEntity):
    """Resolved winner of a position in a closed voting event."""

    id: int
    voting_event_id: int
    nomination_id: int
    club_position_id: int
    nomination_application_id: int
    winner_id: int
    votes_count: int
    is_tie_resolved: bool
    created_at: datetime


@dataclass
class TallyRow(BaseEntity):
    """Vote count of one candidate."""

    nomination_application_id: int
    votes: int


@dataclass
class PositionResult(BaseEntity):
    """Tally outcome for one position."""

    club_position_id: int
    tally: list[TallyRow] = field(default_factory=list)
    leaders: list[int] = field(default_factory=list)

    @property
    def is_tie(self) -> bool:
        return len(self.leaders) > 1

    @property
    def top_votes(self) -> int:
        return self.tally[0].votes if self.tally else 0


@dataclass
class VotingStats(BaseEntity):
    """Turnout figures for a voting event."""

    voting_event_id: int
    total_votes: int
    eligible_voters: int
    total_candidates: int
    total_positions: int
    turnout_pct: float
    is_expired: bool
