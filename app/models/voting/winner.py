"""Nomination winner (resolved seat per position) model."""

NOMINATION_WINNER_SEQ_DDL = "CREATE SEQUENCE IF NOT EXISTS nomination_winner_id_seq START 1"

# One row per (voting_event_id, club_position_id); rows are replaced as a set
# inside the resolving transaction.
NOMINATION_WINNER_DDL = """
CREATE TABLE IF NOT EXISTS nomination_winner (
    id INTEGER PRIMARY KEY DEFAULT nextval('nomination_winner_id_seq'),
    voting_event_id INTEGER NOT NULL,
    nomination_id INTEGER NOT NULL,
    club_position_id INTEGER NOT NULL,
    nomination_application_id INTEGER NOT NULL,
    winner_id INTEGER NOT NULL,
    votes_count INTEGER NOT NULL,
    is_tie_resolved BOOLEAN NOT NULL DEFAULT FALSE,
    created_at TIMESTAMP NOT NULL
)
"""

NOMINATION_WINNER_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_winner_event ON nomination_winner(voting_event_id)",
]
