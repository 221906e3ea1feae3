"""Voting event (election window) model."""

VOTING_EVENT_SEQ_DDL = "CREATE SEQUENCE IF NOT EXISTS voting_event_id_seq START 1"

# open_club_id mirrors club_id while status is 'active' or 'draft' and is NULL
# otherwise, so the UNIQUE constraint allows one open event per club.
VOTING_EVENT_DDL = """
CREATE TABLE IF NOT EXISTS voting_event (
    id INTEGER PRIMARY KEY DEFAULT nextval('voting_event_id_seq'),
    club_id INTEGER NOT NULL,
    nomination_id INTEGER,
    title VARCHAR NOT NULL,
    description VARCHAR,
    start_date TIMESTAMP NOT NULL,
    end_date TIMESTAMP NOT NULL,
    status VARCHAR NOT NULL,
    open_club_id INTEGER UNIQUE,
    closed_at TIMESTAMP,
    created_at TIMESTAMP NOT NULL
)
"""

VOTING_EVENT_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_voting_event_club ON voting_event(club_id)",
]
