"""Nomination repository - candidacy windows of a club."""

from datetime import datetime

from loguru import logger

from app.models.nominations import Nomination, NominationStatus
from app.repositories.base import BaseRepository

NOMINATION_COLUMNS = (
    "id, club_id, title, description, start_date, end_date, status, max_applicants, created_at"
)

ACTIVE_NOMINATION_CONFLICT = "Club already has an active nomination."


def _active_slot(club_id: int, status: str) -> int | None:
    return club_id if status == NominationStatus.ACTIVE else None


class NominationRepository(BaseRepository):
    """Repository for nominations."""

    def create(
        self,
        club_id: int,
        title: str,
        start_date: datetime,
        end_date: datetime,
        status: str,
        created_at: datetime,
        description: str | None = None,
        max_applicants: int | None = None,
    ) -> int:
        with self.unique(ACTIVE_NOMINATION_CONFLICT):
            nomination_id = self.insert(
                """
                INSERT INTO nomination (club_id, title, description, start_date, end_date,
                                        status, max_applicants, active_club_id, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                RETURNING id
                """,
                [
                    club_id,
                    title,
                    description,
                    start_date,
                    end_date,
                    status,
                    max_applicants,
                    _active_slot(club_id, status),
                    created_at,
                ],
            )
        logger.debug("Nomination {} created for club {}", nomination_id, club_id)
        return nomination_id

    def get(self, nomination_id: int) -> Nomination | None:
        row = self.fetchone(f"SELECT {NOMINATION_COLUMNS} FROM nomination WHERE id = ?", [nomination_id])
        return Nomination(*row) if row else None

    def find_active(self, club_id: int) -> Nomination | None:
        row = self.fetchone(
            f"SELECT {NOMINATION_COLUMNS} FROM nomination WHERE club_id = ? AND status = 'active'",
            [club_id],
        )
        return Nomination(*row) if row else None

    def latest_finished(self, club_id: int) -> Nomination | None:
        """Most recently created closed or archived nomination of a club."""
        row = self.fetchone(
            f"""
            SELECT {NOMINATION_COLUMNS} FROM nomination
            WHERE club_id = ? AND status IN ('closed', 'archived')
            ORDER BY created_at DESC, id DESC
            LIMIT 1
            """,
            [club_id],
        )
        return Nomination(*row) if row else None

    def list_for_club(self, club_id: int) -> list[Nomination]:
        rows = self.fetchall(
            f"SELECT {NOMINATION_COLUMNS} FROM nomination WHERE club_id = ? ORDER BY created_at DESC, id DESC",
            [club_id],
        )
        return [Nomination(*r) for r in rows]

    def set_status(self, nomination: Nomination, status: str) -> None:
        """Change status, keeping the one-active-per-club slot in step."""
        old_slot = _active_slot(nomination.club_id, nomination.status)
        new_slot = _active_slot(nomination.club_id, status)

        # An indexed column is only written when it really changes.
        if old_slot == new_slot:
            self.execute("UPDATE nomination SET status = ? WHERE id = ?", [status, nomination.id])
            return

        with self.unique(ACTIVE_NOMINATION_CONFLICT):
            self.execute(
                "UPDATE nomination SET status = ?, active_club_id = ? WHERE id = ?",
                [status, new_slot, nomination.id],
            )

    def delete(self, nomination_id: int) -> None:
        self.execute("DELETE FROM nomination WHERE id = ?", [nomination_id])

    def list_expired(self, now: datetime) -> list[Nomination]:
        """Active nominations whose end date has passed."""
        rows = self.fetchall(
            f"SELECT {NOMINATION_COLUMNS} FROM nomination WHERE status = 'active' AND end_date < ? ORDER BY id",
            [now],
        )
        return [Nomination(*r) for r in rows]

    def list_with_deadline_between(self, start: datetime, end: datetime) -> list[Nomination]:
        """Draft/active nominations starting or ending inside [start, end]."""
        rows = self.fetchall(
            f"""
            SELECT {NOMINATION_COLUMNS} FROM nomination
            WHERE status IN ('draft', 'active')
              AND (start_date BETWEEN ? AND ? OR end_date BETWEEN ? AND ?)
            ORDER BY id
            """,
            [start, end, start, end],
        )
        return [Nomination(*r) for r in rows]
