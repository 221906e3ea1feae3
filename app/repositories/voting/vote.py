"""Vote repository - ballots and per-candidate tallies."""

from datetime import datetime

from loguru import logger

from app.models.voting import TallyRow, Vote
from app.repositories.base import BaseRepository

VOTE_COLUMNS = "id, voting_event_id, nomination_application_id, club_position_id, user_id, created_at"

ALREADY_VOTED = "You have already voted for this position."


class VoteRepository(BaseRepository):
    """Repository for votes."""

    def create(
        self,
        event_id: int,
        application_id: int,
        position_id: int,
        user_id: int,
        created_at: datetime,
    ) -> int:
        with self.unique(ALREADY_VOTED):
            vote_id = self.insert(
                """
                INSERT INTO vote (voting_event_id, nomination_application_id, club_position_id, user_id, created_at)
                VALUES (?, ?, ?, ?, ?)
                RETURNING id
                """,
                [event_id, application_id, position_id, user_id, created_at],
            )
        logger.debug("Vote {} recorded: event={}, position={}", vote_id, event_id, position_id)
        return vote_id

    def get(self, vote_id: int) -> Vote | None:
        row = self.fetchone(f"SELECT {VOTE_COLUMNS} FROM vote WHERE id = ?", [vote_id])
        return Vote(*row) if row else None

    def find_for_position(self, event_id: int, user_id: int, position_id: int) -> Vote | None:
        """The voter's vote for any candidate of a position, if any."""
        row = self.fetchone(
            f"""
            SELECT {VOTE_COLUMNS} FROM vote
            WHERE voting_event_id = ? AND user_id = ? AND club_position_id = ?
            """,
            [event_id, user_id, position_id],
        )
        return Vote(*row) if row else None

    def list_for_voter(self, event_id: int, user_id: int) -> list[Vote]:
        rows = self.fetchall(
            f"SELECT {VOTE_COLUMNS} FROM vote WHERE voting_event_id = ? AND user_id = ? ORDER BY id",
            [event_id, user_id],
        )
        return [Vote(*r) for r in rows]

    def count_for_event(self, event_id: int) -> int:
        row = self.fetchone("SELECT COUNT(*) FROM vote WHERE voting_event_id = ?", [event_id])
        return int(row[0])

    def count_for_position(self, event_id: int, position_id: int) -> int:
        row = self.fetchone(
            "SELECT COUNT(*) FROM vote WHERE voting_event_id = ? AND club_position_id = ?",
            [event_id, position_id],
        )
        return int(row[0])

    def tally(self, event_id: int, position_id: int) -> list[TallyRow]:
        """Votes per candidate of a position, most votes first.

        Equal counts are ordered by the candidate's submission (earliest first).
        """
        rows = self.fetchall(
            """
            SELECT v.nomination_application_id, COUNT(*) AS votes
            FROM vote v
            JOIN nomination_application a ON a.id = v.nomination_application_id
            WHERE v.voting_event_id = ? AND a.club_position_id = ?
            GROUP BY v.nomination_application_id, a.created_at, a.id
            ORDER BY votes DESC, a.created_at, a.id
            """,
            [event_id, position_id],
        )
        return [TallyRow(nomination_application_id=r[0], votes=int(r[1])) for r in rows]

    def count_voters(self, event_id: int) -> int:
        """Distinct users who cast at least one vote in the event."""
        row = self.fetchone("SELECT COUNT(DISTINCT user_id) FROM vote WHERE voting_event_id = ?", [event_id])
        return int(row[0])
