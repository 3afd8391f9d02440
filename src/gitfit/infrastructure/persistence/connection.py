"""
infrastructure.persistence.connection - Async SQLite connection manager.

Every repository call acquires its own connection and releases it on every
exit path. Nothing is pooled or shared between calls.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import aiosqlite

logger = logging.getLogger(__name__)


class AsyncSQLiteConnection:
    """Opens one aiosqlite connection per unit of work."""

    def __init__(self, db_path: str):
        self._db_path = db_path
        if db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[aiosqlite.Connection]:
        """Yield a connection whose rows are addressable by column name.

        The block's writes are committed when it exits normally. Any
        exception rolls them back, is logged, and reaches the caller as is.
        """
        conn = await aiosqlite.connect(self._db_path)
        conn.row_factory = aiosqlite.Row
        try:
            await conn.execute("PRAGMA foreign_keys = ON")
            yield conn
            await conn.commit()
        except Exception:
            await conn.rollback()
            logger.exception("Rolled back work on %s", self._db_path)
            raise
        finally:
            await conn.close()
