"""Nomination domain models - nominations and candidacy applications."""

from app.models.nominations.application import NOMINATION_APPLICATION_DDL, NOMINATION_APPLICATION_SEQ_DDL
from app.models.nominations.entities import (
    FINISHED_NOMINATION_STATUSES,
    ApplicationStatus,
    Nomination,
    NominationApplication,
    NominationStatus,
)
from app.models.nominations.nomination import NOMINATION_DDL, NOMINATION_INDEXES, NOMINATION_SEQ_DDL

__all__ = [
    "NOMINATION_SEQ_DDL",
    "NOMINATION_DDL",
    "NOMINATION_INDEXES",
    "NOMINATION_APPLICATION_SEQ_DDL",
    "NOMINATION_APPLICATION_DDL",
    "FINISHED_NOMINATION_STATUSES",
    "ApplicationStatus",
    "Nomination",
    "NominationApplication",
    "NominationStatus",
]
