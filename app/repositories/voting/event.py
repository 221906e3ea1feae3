"""Voting event repository - election windows of a club."""

from datetime import datetime

from loguru import logger

from app.models.voting import OPEN_EVENT_STATUSES, VotingEvent
from app.repositories.base import BaseRepository

EVENT_COLUMNS = (
    "id, club_id, nomination_id, title, description, start_date, end_date, status, closed_at, created_at"
)

OPEN_EVENT_CONFLICT = (
    "This club already has an active or draft voting event. "
    "Please close the voting event before creating a new one."
)


def _open_slot(club_id: int, status: str) -> int | None:
    return club_id if status in OPEN_EVENT_STATUSES else None


class VotingEventRepository(BaseRepository):
    """Repository for voting events."""

    def create(
        self,
        club_id: int,
        nomination_id: int | None,
        title: str,
        start_date: datetime,
        end_date: datetime,
        status: str,
        created_at: datetime,
        description: str | None = None,
    ) -> int:
        with self.unique(OPEN_EVENT_CONFLICT):
            event_id = self.insert(
                """
                INSERT INTO voting_event (club_id, nomination_id, title, description, start_date,
                                          end_date, status, open_club_id, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                RETURNING id
                """,
                [
                    club_id,
                    nomination_id,
                    title,
                    description,
                    start_date,
                    end_date,
                    status,
                    _open_slot(club_id, status),
                    created_at,
                ],
            )
        logger.debug("Voting event {} created for club {}", event_id, club_id)
        return event_id

    def get(self, event_id: int) -> VotingEvent | None:
        row = self.fetchone(f"SELECT {EVENT_COLUMNS} FROM voting_event WHERE id = ?", [event_id])
        return VotingEvent(*row) if row else None

    def find_open(self, club_id: int, exclude_id: int | None = None) -> VotingEvent | None:
        """Active or draft event of a club, optionally ignoring one event."""
        query = f"SELECT {EVENT_COLUMNS} FROM voting_event WHERE club_id = ? AND status IN ('active', 'draft')"
        params: list = [club_id]
        if exclude_id is not None:
            query += " AND id != ?"
            params.append(exclude_id)
        row = self.fetchone(query + " LIMIT 1", params)
        return VotingEvent(*row) if row else None

    def latest_closed(self, club_id: int) -> VotingEvent | None:
        row = self.fetchone(
            f"""
            SELECT {EVENT_COLUMNS} FROM voting_event
            WHERE club_id = ? AND status = 'closed'
            ORDER BY closed_at DESC NULLS LAST, id DESC
            LIMIT 1
            """,
            [club_id],
        )
        return VotingEvent(*row) if row else None

    def closed_for_nomination(self, nomination_id: int) -> bool:
        """Whether a closed/archived event has consumed this nomination's roster."""
        row = self.fetchone(
            "SELECT COUNT(*) FROM voting_event WHERE nomination_id = ? AND status IN ('closed', 'archived')",
            [nomination_id],
        )
        return row[0] > 0

    def list_for_club(self, club_id: int) -> list[VotingEvent]:
        rows = self.fetchall(
            f"SELECT {EVENT_COLUMNS} FROM voting_event WHERE club_id = ? ORDER BY created_at DESC, id DESC",
            [club_id],
        )
        return [VotingEvent(*r) for r in rows]

    def update(
        self,
        event: VotingEvent,
        club_id: int,
        nomination_id: int | None,
        title: str,
        description: str | None,
        start_date: datetime,
        end_date: datetime,
    ) -> None:
        """Update details; the open slot follows a club change."""
        if club_id == event.club_id:
            self.execute(
                """
                UPDATE voting_event
                SET title = ?, description = ?, start_date = ?, end_date = ?
                WHERE id = ?
                """,
                [title, description, start_date, end_date, event.id],
            )
            return

        with self.unique(OPEN_EVENT_CONFLICT):
            self.execute(
                """
                UPDATE voting_event
                SET club_id = ?, nomination_id = ?, open_club_id = ?, title = ?, description = ?,
                    start_date = ?, end_date = ?
                WHERE id = ?
                """,
                [
                    club_id,
                    nomination_id,
                    _open_slot(club_id, event.status),
                    title,
                    description,
                    start_date,
                    end_date,
                    event.id,
                ],
            )

    def set_status(self, event: VotingEvent, status: str, closed_at: datetime | None = None) -> None:
        """Change status, keeping the one-open-per-club slot in step."""
        old_slot = _open_slot(event.club_id, event.status)
        new_slot = _open_slot(event.club_id, status)
        closed_at = closed_at or event.closed_at

        if old_slot == new_slot:
            self.execute(
                "UPDATE voting_event SET status = ?, closed_at = ? WHERE id = ?",
                [status, closed_at, event.id],
            )
            return

        with self.unique(OPEN_EVENT_CONFLICT):
            self.execute(
                "UPDATE voting_event SET status = ?, closed_at = ?, open_club_id = ? WHERE id = ?",
                [status, closed_at, new_slot, event.id],
            )

    def delete(self, event_id: int) -> None:
        self.execute("DELETE FROM voting_event WHERE id = ?", [event_id])

    def list_expired(self, now: datetime) -> list[VotingEvent]:
        """Active events whose end date has passed."""
        rows = self.fetchall(
            f"SELECT {EVENT_COLUMNS} FROM voting_event WHERE status = 'active' AND end_date < ? ORDER BY id",
            [now],
        )
        return [VotingEvent(*r) for r in rows]

    def list_with_deadline_between(self, start: datetime, end: datetime) -> list[VotingEvent]:
        """Draft/active events starting or ending inside [start, end]."""
        rows = self.fetchall(
            f"""
            SELECT {EVENT_COLUMNS} FROM voting_event
            WHERE status IN ('draft', 'active')
              AND (start_date BETWEEN ? AND ? OR end_date BETWEEN ? AND ?)
            ORDER BY id
            """,
            [start, end, start, end],
        )
        return [VotingEvent(*r) for r in rows]
