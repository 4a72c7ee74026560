"""
db/connection.py
----------------
Manages the single SQLite connection used by the whole process.

Every statement runs on one dedicated worker thread owned by the Store, so
callers simply ``await`` the result while the event loop keeps serving
other requests. Statements on the shared connection are serialized.
"""

import asyncio
import sqlite3
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Optional, Sequence

from config import DATABASE_PATH
from db.errors import ConstraintError, StoreError
from models.user import WriteResult
from utils.logger import get_logger

logger = get_logger(__name__)


class Store:
    """Async wrapper around one persistent SQLite connection."""

    def __init__(self, path: str = DATABASE_PATH):
        self.path = path
        self._conn: Optional[sqlite3.Connection] = None
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def connected(self) -> bool:
        return self._conn is not None

    # ── LIFECYCLE ─────────────────────────────────────────

    async def connect(self) -> None:
        """
        Open the connection. Safe to call more than once.

        The open runs on the worker thread, so concurrent first statements
        share one connection. A failure is logged and leaves the store
        disconnected; the next statement will try to connect again.
        """
        if self._conn is not None:
            return
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="store")
        try:
            if await self._run(self._open):
                logger.info(f"Connected to SQLite at {self.path}")
        except sqlite3.Error as e:
            logger.error(f"Failed to connect to SQLite at {self.path}: {e}")

    async def close(self) -> None:
        """Close the connection and stop the worker thread."""
        if self._conn is not None:
            await self._run(self._conn.close)
            self._conn = None
            logger.info("SQLite connection closed.")
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    # ── STATEMENTS ────────────────────────────────────────

    async def execute(self, sql: str, params: Sequence[Any] = ()) -> WriteResult:
        """
        Run a mutating statement and commit it.

        Returns:
            WriteResult with the last inserted row id and affected row count.

        Raises:
            ConstraintError: If a table constraint is violated.
            StoreError: For any other store failure.
        """
        conn = await self._ensure_connected()

        def work() -> WriteResult:
            try:
                cur = conn.execute(sql, params)
                conn.commit()
                return WriteResult(last_inserted_id=cur.lastrowid, rows_affected=cur.rowcount)
            except sqlite3.Error:
                conn.rollback()
                raise

        return await self._statement(work, sql)

    async def fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[dict]:
        """Run a query expected to return zero or one row."""
        conn = await self._ensure_connected()

        def work() -> Optional[dict]:
            row = conn.execute(sql, params).fetchone()
            return dict(row) if row else None

        return await self._statement(work, sql)

    async def fetch_many(self, sql: str, params: Sequence[Any] = ()) -> list[dict]:
        """Run a query returning zero or more rows."""
        conn = await self._ensure_connected()

        def work() -> list[dict]:
            return [dict(r) for r in conn.execute(sql, params).fetchall()]

        return await self._statement(work, sql)

    # ── INTERNALS ─────────────────────────────────────────

    def _open(self) -> bool:
        if self._conn is not None:
            return False
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        self._conn = conn
        return True

    async def _ensure_connected(self) -> sqlite3.Connection:
        if self._conn is None:
            await self.connect()
        if self._conn is None:
            raise StoreError(f"No connection to SQLite at {self.path}")
        return self._conn

    async def _run(self, fn: Callable[[], Any]) -> Any:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, fn)

    async def _statement(self, fn: Callable[[], Any], sql: str) -> Any:
        try:
            return await self._run(fn)
        except sqlite3.IntegrityError as e:
            logger.warning(f"Constraint violation: {e}")
            raise ConstraintError(str(e)) from e
        except sqlite3.Error as e:
            logger.error(f"Statement failed: {e} | SQL: {' '.join(sql.split())}")
            raise StoreError(str(e)) from e


_store: Optional[Store] = None


async def init_store(path: str = DATABASE_PATH) -> Store:
    """
    Create and connect the process-wide store.

    Args:
        path: SQLite database file (``:memory:`` works too).

    Returns:
        The shared Store instance.

    Raises:
        RuntimeError: If a store for a different path is already open.
    """
    global _store
    if _store is not None:
        if _store.path != path:
            raise RuntimeError(
                f"Store already initialized for {_store.path}; close_store() before opening {path}"
            )
        return _store
    _store = Store(path)
    await _store.connect()
    return _store


def get_store() -> Store:
    """
    Get the process-wide store.

    Raises:
        RuntimeError: If the store has not been initialized.
    """
    if _store is None:
        raise RuntimeError("Store not initialized. Call init_store() first.")
    return _store


async def close_store() -> None:
    """Close the process-wide store."""
    global _store
    if _store is not None:
        await _store.close()
        _store = None
