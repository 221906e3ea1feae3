"""Club membership pivot (club <-> user) model."""

CLUB_MEMBER_SEQ_DDL = "CREATE SEQUENCE IF NOT EXISTS club_member_id_seq START 1"

# position_id is the manual (administrative) seat assignment, independent of elections.
CLUB_MEMBER_DDL = """
CREATE TABLE IF NOT EXISTS club_member (
    id INTEGER PRIMARY KEY DEFAULT nextval('club_member_id_seq'),
    club_id INTEGER NOT NULL,
    user_id INTEGER NOT NULL,
    status VARCHAR NOT NULL,
    position_id INTEGER,
    joined_at TIMESTAMP NOT NULL,
    UNIQUE (club_id, user_id)
)
"""
