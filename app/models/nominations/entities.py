"""Nomination domain entities."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from app.models.common import BaseEntity


class NominationStatus(StrEnum):
    DRAFT = "draft"
    ACTIVE = "active"
    CLOSED = "closed"
    ARCHIVED = "archived"


class ApplicationStatus(StrEnum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


FINISHED_NOMINATION_STATUSES = (NominationStatus.CLOSED, NominationStatus.ARCHIVED)


@dataclass
class Nomination(BaseEntity):
    """Time-boxed window in which members apply for club positions."""

    id: int
    club_id: int
    title: str
    description: str | None
    start_date: datetime
    end_date: datetime
    status: str
    max_applicants: int | None
    created_at: datetime

    @property
    def is_finished(self) -> bool:
        return self.status in FINISHED_NOMINATION_STATUSES


@dataclass
class NominationApplication(BaseEntity):
    """One user's candidacy for one position."""

    id: int
    nomination_id: int
    user_id: int
    club_position_id: int
    status: str
    statement: str | None
    admin_notes: str | None
    created_at: datetime
    updated_at: datetime

    @property
    def is_approved(self) -> bool:
        return self.status == ApplicationStatus.APPROVED
