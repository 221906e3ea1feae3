"""Membership repository - the club/user pivot."""

from datetime import datetime

from app.models.clubs import ClubMember
from app.repositories.base import BaseRepository

MEMBER_COLUMNS = "id, club_id, user_id, status, position_id, joined_at"


class MemberRepository(BaseRepository):
    """Repository for club membership rows."""

    def get(self, club_id: int, user_id: int) -> ClubMember | None:
        row = self.fetchone(
            f"SELECT {MEMBER_COLUMNS} FROM club_member WHERE club_id = ? AND user_id = ?",
            [club_id, user_id],
        )
        return ClubMember(*row) if row else None

    def add(self, club_id: int, user_id: int, status: str, joined_at: datetime) -> int:
        with self.unique("You are already a member of this club."):
            return self.insert(
                """
                INSERT INTO club_member (club_id, user_id, status, joined_at)
                VALUES (?, ?, ?, ?)
                RETURNING id
                """,
                [club_id, user_id, status, joined_at],
            )

    def set_status(self, club_id: int, user_id: int, status: str) -> None:
        self.execute(
            "UPDATE club_member SET status = ? WHERE club_id = ? AND user_id = ?",
            [status, club_id, user_id],
        )

    def set_position(self, club_id: int, user_id: int, position_id: int | None) -> None:
        self.execute(
            "UPDATE club_member SET position_id = ? WHERE club_id = ? AND user_id = ?",
            [position_id, club_id, user_id],
        )

    def remove(self, club_id: int, user_id: int) -> None:
        self.execute("DELETE FROM club_member WHERE club_id = ? AND user_id = ?", [club_id, user_id])

    def list_members(self, club_id: int, status: str | None = None) -> list[ClubMember]:
        query = f"SELECT {MEMBER_COLUMNS} FROM club_member WHERE club_id = ?"
        params: list = [club_id]
        if status:
            query += " AND status = ?"
            params.append(status)
        query += " ORDER BY joined_at, id"
        return [ClubMember(*r) for r in self.fetchall(query, params)]

    def count_by_status(self, club_id: int) -> dict[str, int]:
        rows = self.fetchall(
            "SELECT status, COUNT(*) FROM club_member WHERE club_id = ? GROUP BY status",
            [club_id],
        )
        return {r[0]: int(r[1]) for r in rows}

    def count_active(self, club_id: int) -> int:
        row = self.fetchone(
            "SELECT COUNT(*) FROM club_member WHERE club_id = ? AND status = 'active'",
            [club_id],
        )
        return int(row[0])

    def clear_positions(self, club_id: int) -> None:
        """Drop manual seat assignments of a club."""
        self.execute(
            "UPDATE club_member SET position_id = NULL WHERE club_id = ? AND position_id IS NOT NULL",
            [club_id],
        )

    def manual_holder(self, club_id: int, position_id: int) -> int | None:
        """Earliest-joined member manually assigned to a position."""
        row = self.fetchone(
            """
            SELECT user_id FROM club_member
            WHERE club_id = ? AND position_id = ?
            ORDER BY joined_at, id
            LIMIT 1
            """,
            [club_id, position_id],
        )
        return row[0] if row else None
