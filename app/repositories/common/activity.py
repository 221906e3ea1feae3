"""Activity repository - append-only activity log storage."""

from datetime import datetime

from app.models.common import ActivityEntry
from app.repositories.base import BaseRepository


class ActivityRepository(BaseRepository):
    """Repository for activity log entries."""

    def add(self, actor_id: int | None, message: str, category: str, created_at: datetime) -> int:
        return self.insert(
            """
            INSERT INTO activity_log (actor_id, message, category, created_at)
            VALUES (?, ?, ?, ?)
            RETURNING id
            """,
            [actor_id, message, category, created_at],
        )

    def recent(self, limit: int = 50, category: str | None = None) -> list[ActivityEntry]:
        query = "SELECT id, actor_id, message, category, created_at FROM activity_log"
        params: list = []
        if category:
            query += " WHERE category = ?"
            params.append(category)
        query += " ORDER BY id DESC LIMIT ?"
        params.append(limit)
        return [ActivityEntry(*r) for r in self.fetchall(query, params)]
