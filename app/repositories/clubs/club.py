"""Club repository - clubs and their position catalog."""

from datetime import datetime
from decimal import Decimal

import polars as pl
from loguru import logger

from app.models.clubs import Club, ClubPosition, PositionSpec
from app.repositories.base import BaseRepository

CLUB_COLUMNS = "id, name, description, status, join_fee, created_at"
POSITION_COLUMNS = "id, club_id, name, description, is_active, created_at"

POSITIONS_SCHEMA = {
    "club_id": pl.Int64,
    "name": pl.Utf8,
    "description": pl.Utf8,
    "is_active": pl.Boolean,
    "created_at": pl.Datetime,
}


class ClubRepository(BaseRepository):
    """Repository for clubs and club positions."""

    def create(
        self,
        name: str,
        status: str,
        join_fee: Decimal,
        created_at: datetime,
        description: str | None = None,
    ) -> int:
        club_id = self.insert(
            """
            INSERT INTO club (name, description, status, join_fee, created_at)
            VALUES (?, ?, ?, ?, ?)
            RETURNING id
            """,
            [name, description, status, join_fee, created_at],
        )
        logger.debug("Club {} created: {}", club_id, name)
        return club_id

    def get(self, club_id: int) -> Club | None:
        row = self.fetchone(f"SELECT {CLUB_COLUMNS} FROM club WHERE id = ?", [club_id])
        return Club(*row) if row else None

    def update(self, club_id: int, **fields) -> None:
        """Update the given columns of a club."""
        if not fields:
            return
        assignments = ", ".join(f"{column} = ?" for column in fields)
        self.execute(f"UPDATE club SET {assignments} WHERE id = ?", [*fields.values(), club_id])

    def get_positions(self, club_id: int, active_only: bool = False) -> list[ClubPosition]:
        """Positions of a club in creation order."""
        query = f"SELECT {POSITION_COLUMNS} FROM club_position WHERE club_id = ?"
        if active_only:
            query += " AND is_active = TRUE"
        query += " ORDER BY id"
        return [ClubPosition(*r) for r in self.fetchall(query, [club_id])]

    def get_position(self, position_id: int) -> ClubPosition | None:
        row = self.fetchone(f"SELECT {POSITION_COLUMNS} FROM club_position WHERE id = ?", [position_id])
        return ClubPosition(*row) if row else None

    def delete_positions(self, club_id: int) -> list[int]:
        """Delete every position of a club, returning the removed ids."""
        rows = self.fetchall("DELETE FROM club_position WHERE club_id = ? RETURNING id", [club_id])
        return [r[0] for r in rows]

    def insert_positions(self, club_id: int, positions: list[PositionSpec], created_at: datetime) -> None:
        """Bulk insert a position list."""
        if not positions:
            return

        positions_df = pl.DataFrame(
            [
                {
                    "club_id": club_id,
                    "name": p.name,
                    "description": p.description,
                    "is_active": p.is_active,
                    "created_at": created_at,
                }
                for p in positions
            ],
            schema=POSITIONS_SCHEMA,
        )
        self._db.register("positions_df", positions_df)
        try:
            self.execute(
                """
                INSERT INTO club_position (club_id, name, description, is_active, created_at)
                SELECT club_id, name, description, is_active, created_at FROM positions_df
                """
            )
        finally:
            self._db.unregister("positions_df")
        logger.debug("Club {}: inserted {} positions", club_id, len(positions))
