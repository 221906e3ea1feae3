"""Nomination application (candidacy) model."""

NOMINATION_APPLICATION_SEQ_DDL = "CREATE SEQUENCE IF NOT EXISTS nomination_application_id_seq START 1"

NOMINATION_APPLICATION_DDL = """
CREATE TABLE IF NOT EXISTS nomination_application (
    id INTEGER PRIMARY KEY DEFAULT nextval('nomination_application_id_seq'),
    nomination_id INTEGER NOT NULL,
    user_id INTEGER NOT NULL,
    club_position_id INTEGER NOT NULL,
    status VARCHAR NOT NULL,
    statement VARCHAR,
    admin_notes VARCHAR,
    created_at TIMESTAMP NOT NULL,
    updated_at TIMESTAMP NOT NULL,
    UNIQUE (nomination_id, user_id, club_position_id)
)
"""
