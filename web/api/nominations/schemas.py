"""Nominations API response schemas."""

from datetime import datetime

from pydantic import BaseModel


class NominationResponse(BaseModel):
    """Nomination window."""

    id: int
    club_id: int
    title: str
    description: str | None
    start_date: datetime
    end_date: datetime
    status: str
    max_applicants: int | None
    created_at: datetime


class NominationsResponse(BaseModel):
    """Nominations of a club."""

    club_id: int
    items: list[NominationResponse]


class ApplicationResponse(BaseModel):
    """Candidacy for one position."""

    id: int
    nomination_id: int
    user_id: int
    club_position_id: int
    status: str
    statement: str | None
    admin_notes: str | None
    created_at: datetime
    updated_at: datetime


class ApplicationsResponse(BaseModel):
    """Applications of a nomination."""

    nomination_id: int
    items: list[ApplicationResponse]
