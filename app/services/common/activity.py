"""Activity log sink - best-effort audit trail."""

import duckdb
from loguru import logger

from app.models.common import ActivityEntry, utcnow
from app.repositories.common import ActivityRepository


class ActivityLog:
    """Append-only activity log.

    Recording never raises: a failed write is logged and dropped, so it can
    never undo a domain change that already committed.
    """

    def __init__(self, repo: ActivityRepository):
        self._repo = repo

    def record(self, actor_id: int | None, message: str, category: str) -> None:
        logger.bind(activity=True, actor_id=actor_id, category=category).info("[{}] {}", category, message)
        try:
            self._repo.add(actor_id, message, category, utcnow())
        except duckdb.Error as e:
            logger.warning("Activity log write failed ({}): {}", category, e)

    def recent(self, limit: int = 50, category: str | None = None) -> list[ActivityEntry]:
        return self._repo.recent(limit, category)
