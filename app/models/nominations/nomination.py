"""Nomination (candidacy window) model."""

NOMINATION_SEQ_DDL = "CREATE SEQUENCE IF NOT EXISTS nomination_id_seq START 1"

# active_club_id mirrors club_id while status = 'active' and is NULL otherwise,
# so the UNIQUE constraint allows one active nomination per club.
NOMINATION_DDL = """
CREATE TABLE IF NOT EXISTS nomination (
    id INTEGER PRIMARY KEY DEFAULT nextval('nomination_id_seq'),
    club_id INTEGER NOT NULL,
    title VARCHAR NOT NULL,
    description VARCHAR,
    start_date TIMESTAMP NOT NULL,
    end_date TIMESTAMP NOT NULL,
    status VARCHAR NOT NULL,
    max_applicants INTEGER,
    active_club_id INTEGER UNIQUE,
    created_at TIMESTAMP NOT NULL
)
"""

NOMINATION_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_nomination_club ON nomination(club_id)",
]
