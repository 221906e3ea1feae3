"""Nomination application repository - candidacies within a nomination."""

from datetime import datetime

from app.models.nominations import NominationApplication
from app.repositories.base import BaseRepository

APPLICATION_COLUMNS = (
    "id, nomination_id, user_id, club_position_id, status, statement, admin_notes, created_at, updated_at"
)


class ApplicationRepository(BaseRepository):
    """Repository for nomination applications."""

    def create(
        self,
        nomination_id: int,
        user_id: int,
        position_id: int,
        status: str,
        created_at: datetime,
        statement: str | None = None,
    ) -> int:
        with self.unique("You have already applied for this position."):
            return self.insert(
                """
                INSERT INTO nomination_application (nomination_id, user_id, club_position_id, status,
                                                    statement, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                RETURNING id
                """,
                [nomination_id, user_id, position_id, status, statement, created_at, created_at],
            )

    def get(self, application_id: int) -> NominationApplication | None:
        row = self.fetchone(
            f"SELECT {APPLICATION_COLUMNS} FROM nomination_application WHERE id = ?",
            [application_id],
        )
        return NominationApplication(*row) if row else None

    def find(self, nomination_id: int, user_id: int, position_id: int) -> NominationApplication | None:
        row = self.fetchone(
            f"""
            SELECT {APPLICATION_COLUMNS} FROM nomination_application
            WHERE nomination_id = ? AND user_id = ? AND club_position_id = ?
            """,
            [nomination_id, user_id, position_id],
        )
        return NominationApplication(*row) if row else None

    def set_status(self, application_id: int, status: str, admin_notes: str | None, updated_at: datetime) -> None:
        self.execute(
            "UPDATE nomination_application SET status = ?, admin_notes = ?, updated_at = ? WHERE id = ?",
            [status, admin_notes, updated_at, application_id],
        )

    def exists_for_nomination(self, nomination_id: int) -> bool:
        row = self.fetchone(
            "SELECT COUNT(*) FROM nomination_application WHERE nomination_id = ?",
            [nomination_id],
        )
        return row[0] > 0

    def count_for_nomination(self, nomination_id: int) -> int:
        row = self.fetchone(
            "SELECT COUNT(*) FROM nomination_application WHERE nomination_id = ?",
            [nomination_id],
        )
        return int(row[0])

    def list_for_nomination(self, nomination_id: int, status: str | None = None) -> list[NominationApplication]:
        """Applications of a nomination ordered by position, then submission."""
        query = f"SELECT {APPLICATION_COLUMNS} FROM nomination_application WHERE nomination_id = ?"
        params: list = [nomination_id]
        if status:
            query += " AND status = ?"
            params.append(status)
        query += " ORDER BY club_position_id, created_at, id"
        return [NominationApplication(*r) for r in self.fetchall(query, params)]

    def list_for_user(self, user_id: int) -> list[NominationApplication]:
        rows = self.fetchall(
            f"SELECT {APPLICATION_COLUMNS} FROM nomination_application WHERE user_id = ? ORDER BY created_at DESC, id DESC",
            [user_id],
        )
        return [NominationApplication(*r) for r in rows]
