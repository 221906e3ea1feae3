"""Voting API response schemas."""

from datetime import datetime

from pydantic import BaseModel


class VotingEventResponse(BaseModel):
    """Voting event."""

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


class VotingEventsResponse(BaseModel):
    """Voting events of a club."""

    club_id: int
    items: list[VotingEventResponse]


class VoteResponse(BaseModel):
    """Recorded vote."""

    id: int
    voting_event_id: int
    nomination_application_id: int
    club_position_id: int
    user_id: int
    created_at: datetime


class BallotResponse(BaseModel):
    """What the acting voter has already chosen."""

    voting_event_id: int
    user_id: int
    voted_candidates: list[int]
    has_voted_all: bool


class TallyItem(BaseModel):
    """Votes for one candidate."""

    nomination_application_id: int
    votes: int


class PositionResultItem(BaseModel):
    """Standings for one position."""

    club_position_id: int
    tally: list[TallyItem]
    leaders: list[int]
    is_tie: bool


class ResultsResponse(BaseModel):
    """Standings of a voting event."""

    voting_event_id: int
    items: list[PositionResultItem]


class WinnerItem(BaseModel):
    """Winner of one position."""

    club_position_id: int
    nomination_application_id: int
    winner_id: int
    votes_count: int
    is_tie_resolved: bool


class WinnersResponse(BaseModel):
    """Winners of a voting event."""

    voting_event_id: int
    items: list[WinnerItem]


class StatsResponse(BaseModel):
    """Turnout figures of a voting event."""

    voting_event_id: int
    total_votes: int
    eligible_voters: int
    total_candidates: int
    total_positions: int
    turnout_pct: float
    is_expired: bool
