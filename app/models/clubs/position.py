"""Club position (electable seat) model."""

CLUB_POSITION_SEQ_DDL = "CREATE SEQUENCE IF NOT EXISTS club_position_id_seq START 1"

CLUB_POSITION_DDL = """
CREATE TABLE IF NOT EXISTS club_position (
    id INTEGER PRIMARY KEY DEFAULT nextval('club_position_id_seq'),
    club_id INTEGER NOT NULL,
    name VARCHAR NOT NULL,
    description VARCHAR,
    is_active BOOLEAN NOT NULL DEFAULT TRUE,
    created_at TIMESTAMP NOT NULL
)
"""

CLUB_POSITION_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_club_position_club ON club_position(club_id)",
]
