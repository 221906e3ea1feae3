"""Common models - base classes and shared tables."""

from app.models.common.activity import ACTIVITY_DDL, ACTIVITY_SEQ_DDL, ActivityEntry
from app.models.common.base import BaseEntity, utcnow

__all__ = [
    "BaseEntity",
    "utcnow",
    "ACTIVITY_DDL",
    "ACTIVITY_SEQ_DDL",
    "ActivityEntry",
]
