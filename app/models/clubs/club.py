"""Club model."""

CLUB_SEQ_DDL = "CREATE SEQUENCE IF NOT EXISTS club_id_seq START 1"

CLUB_DDL = """
CREATE TABLE IF NOT EXISTS club (
    id INTEGER PRIMARY KEY DEFAULT nextval('club_id_seq'),
    name VARCHAR NOT NULL,
    description VARCHAR,
    status VARCHAR NOT NULL,
    join_fee DECIMAL(10, 2) NOT NULL DEFAULT 0,
    created_at TIMESTAMP NOT NULL
)
"""
