"""DuckDB connection and transaction management."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager, nullcontext
from pathlib import Path

import duckdb
from loguru import logger

from app.errors import ConflictError
from app.models import ALL_DDL
from settings import DB_PATH

_local = threading.local()

IN_MEMORY = ":memory:"


def db_exists() -> bool:
    """Check if database file exists."""
    return DB_PATH == IN_MEMORY or Path(DB_PATH).exists()


def _tables_exist(conn: duckdb.DuckDBPyConnection) -> bool:
    """Check if main tables already exist."""
    try:
        result = conn.execute(
            "SELECT COUNT(*) FROM information_schema.tables WHERE table_name = 'nomination_winner'"
        ).fetchone()
        return result[0] > 0
    except duckdb.Error:
        return False


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all sequences, tables and indexes (idempotent - uses IF NOT EXISTS)."""
    if _tables_exist(conn):
        return

    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.info("DB tables initialized")


def connect(path: str = DB_PATH) -> duckdb.DuckDBPyConnection:
    """Open a new connection with all tables in place."""
    if path != IN_MEMORY and not Path(path).exists():
        logger.warning("DB not found: {}. Creating empty DB.", path)
    conn = duckdb.connect(path)
    init_tables(conn)
    return conn


def get_db() -> duckdb.DuckDBPyConnection:
    """Get thread-local connection."""
    if not hasattr(_local, "conn") or _local.conn is None:
        _local.conn = connect(DB_PATH)
        logger.debug("DB connected: {}", DB_PATH)
    return _local.conn


def close_db() -> None:
    """Close thread-local connection."""
    if hasattr(_local, "conn") and _local.conn:
        _local.conn.close()
        _local.conn = None
        logger.debug("DB connection closed")


def reconnect_db() -> duckdb.DuckDBPyConnection:
    """Force reconnect."""
    close_db()
    return get_db()


_CONCURRENT_CHANGE = "The record was changed by another request. Please reload and try again."

# Per root connection: (root, lock). Holding the root keeps its id from being reused.
_write_locks: dict[int, tuple] = {}
_write_locks_guard = threading.Lock()


def thread_cursor(root: duckdb.DuckDBPyConnection) -> duckdb.DuckDBPyConnection:
    """This thread's cursor on `root`.

    A DuckDB connection object carries one transaction and one result set, so
    threads sharing the database each work through their own cursor.
    """
    cursors = getattr(_local, "cursors", None)
    if cursors is None:
        cursors = _local.cursors = {}
    entry = cursors.get(id(root))
    if entry is None or entry[0] is not root:
        entry = cursors[id(root)] = (root, root.cursor())
        logger.debug("Opened cursor for thread {}", threading.get_ident())
    return entry[1]


def write_lock(root: duckdb.DuckDBPyConnection):
    """Lock serializing the transactions opened on `root` and its cursors."""
    with _write_locks_guard:
        entry = _write_locks.get(id(root))
        if entry is None or entry[0] is not root:
            entry = _write_locks[id(root)] = (root, threading.RLock())
        return entry[1]


def release(root: duckdb.DuckDBPyConnection) -> None:
    """Forget the calling thread's cursor and the write lock of `root`."""
    cursors = getattr(_local, "cursors", None) or {}
    entry = cursors.pop(id(root), None)
    if entry is not None and entry[0] is root:
        entry[1].close()
    with _write_locks_guard:
        if id(root) in _write_locks and _write_locks[id(root)][0] is root:
            del _write_locks[id(root)]


@contextmanager
def transaction(conn: duckdb.DuckDBPyConnection, lock=None) -> Iterator[duckdb.DuckDBPyConnection]:
    """Run the block in one transaction; roll back on any exception.

    With `lock`, transactions on the same database run one at a time, so the
    checks made inside the block still hold at commit. A write-write conflict
    detected at begin or commit means a concurrent request won the race and is
    reported as a ConflictError.
    """
    with lock if lock is not None else nullcontext():
        try:
            conn.begin()
        except duckdb.TransactionException as e:
            logger.warning("Begin rejected: {}", e)
            raise ConflictError(_CONCURRENT_CHANGE) from e
        try:
            yield conn
        except BaseException:
            conn.rollback()
            raise
        try:
            conn.commit()
        except duckdb.TransactionException as e:
            logger.warning("Commit rejected: {}", e)
            raise ConflictError(_CONCURRENT_CHANGE) from e
