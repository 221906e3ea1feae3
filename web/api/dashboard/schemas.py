"""Dashboard API response schemas."""

from datetime import datetime

from pydantic import BaseModel

from web.api.clubs.schemas import ClubResponse, HolderItem
from web.api.nominations.schemas import NominationResponse
from web.api.voting.schemas import VotingEventResponse


class OverviewResponse(BaseModel):
    """Club overview response."""

    club: ClubResponse
    members: dict[str, int]
    holders: list[HolderItem]
    active_nomination: NominationResponse | None
    open_voting_event: VotingEventResponse | None


class DeadlineItem(BaseModel):
    """Upcoming start or end of a nomination or voting event."""

    kind: str
    id: int
    club_id: int
    title: str
    edge: str
    at: datetime


class DeadlinesResponse(BaseModel):
    """Deadlines within the reminder horizon."""

    items: list[DeadlineItem]
