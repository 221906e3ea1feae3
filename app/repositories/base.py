"""Base repository class."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import duckdb
from loguru import logger

from app.errors import ConflictError
from app.repositories.db import get_db, thread_cursor, transaction, write_lock


class BaseRepository:
    """Base repository with common functionality."""

    def __init__(self, conn: duckdb.DuckDBPyConnection | None = None):
        self._root = conn if conn is not None else get_db()
        logger.debug("{} initialized", self.__class__.__name__)

    @property
    def connection(self) -> duckdb.DuckDBPyConnection:
        return self._root

    @property
    def _db(self) -> duckdb.DuckDBPyConnection:
        """The calling thread's cursor; repositories on one root share it."""
        return thread_cursor(self._root)

    def transaction(self):
        """Transaction on this thread's cursor, serialized with other threads."""
        return transaction(self._db, write_lock(self._root))

    @contextmanager
    def unique(self, conflict_message: str) -> Iterator[None]:
        """Translate a storage uniqueness violation into a ConflictError."""
        try:
            yield
        except (duckdb.ConstraintException, duckdb.TransactionException) as e:
            logger.warning("Constraint rejected write: {}", e)
            raise ConflictError(conflict_message) from e

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        if params:
            return self._db.execute(query, params)
        return self._db.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()

    def insert(self, query: str, params: list) -> int:
        """Execute an INSERT ... RETURNING id and return the new id."""
        return self.fetchone(query, params)[0]
