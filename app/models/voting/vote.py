"""Vote (one ballot entry) model."""

VOTE_SEQ_DDL = "CREATE SEQUENCE IF NOT EXISTS vote_id_seq START 1"

# club_position_id is copied from the candidate at write time so that
# one-vote-per-position is a declarative constraint.
VOTE_DDL = """
CREATE TABLE IF NOT EXISTS vote (
    id INTEGER PRIMARY KEY DEFAULT nextval('vote_id_seq'),
    voting_event_id INTEGER NOT NULL,
    nomination_application_id INTEGER NOT NULL,
    club_position_id INTEGER NOT NULL,
    user_id INTEGER NOT NULL,
    created_at TIMESTAMP NOT NULL,
    UNIQUE (voting_event_id, user_id, club_position_id)
)
"""

VOTE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_vote_candidate ON vote(nomination_application_id)",
]
