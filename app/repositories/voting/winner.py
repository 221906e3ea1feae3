"""Winner repository - resolved position holders per voting event."""

from datetime import datetime

from app.models.voting import NominationWinner
from app.repositories.base import BaseRepository

WINNER_COLUMNS = (
    "id, voting_event_id, nomination_id, club_position_id, nomination_application_id, "
    "winner_id, votes_count, is_tie_resolved, created_at"
)


class WinnerRepository(BaseRepository):
    """Repository for nomination winners."""

    def list_for_event(self, event_id: int) -> list[NominationWinner]:
        rows = self.fetchall(
            f"SELECT {WINNER_COLUMNS} FROM nomination_winner WHERE voting_event_id = ? ORDER BY club_position_id",
            [event_id],
        )
        return [NominationWinner(*r) for r in rows]

    def get_for_position(self, event_id: int, position_id: int) -> NominationWinner | None:
        row = self.fetchone(
            f"""
            SELECT {WINNER_COLUMNS} FROM nomination_winner
            WHERE voting_event_id = ? AND club_position_id = ?
            """,
            [event_id, position_id],
        )
        return NominationWinner(*row) if row else None

    def delete_for_event(self, event_id: int) -> None:
        self.execute("DELETE FROM nomination_winner WHERE voting_event_id = ?", [event_id])

    def create(
        self,
        event_id: int,
        nomination_id: int,
        position_id: int,
        application_id: int,
        winner_id: int,
        votes_count: int,
        is_tie_resolved: bool,
        created_at: datetime,
    ) -> int:
        return self.insert(
            """
            INSERT INTO nomination_winner (voting_event_id, nomination_id, club_position_id,
                                           nomination_application_id, winner_id, votes_count,
                                           is_tie_resolved, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            RETURNING id
            """,
            [event_id, nomination_id, position_id, application_id, winner_id, votes_count, is_tie_resolved, created_at],
        )
