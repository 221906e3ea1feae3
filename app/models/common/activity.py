"""Activity log table - append-only audit trail shared across domains."""

from dataclasses import dataclass
from datetime import datetime

from app.models.common.base import BaseEntity

ACTIVITY_SEQ_DDL = "CREATE SEQUENCE IF NOT EXISTS activity_log_id_seq START 1"

ACTIVITY_DDL = """
CREATE TABLE IF NOT EXISTS activity_log (
    id INTEGER PRIMARY KEY DEFAULT nextval('activity_log_id_seq'),
    actor_id INTEGER,
    message VARCHAR NOT NULL,
    category VARCHAR NOT NULL,
    created_at TIMESTAMP NOT NULL
)
"""


@dataclass
class ActivityEntry(BaseEntity):
    """One activity log line."""

    id: int
    actor_id: int | None
    message: str
    category: str
    created_at: datetime
