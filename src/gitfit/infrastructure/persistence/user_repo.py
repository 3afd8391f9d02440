"""
infrastructure.persistence.user_repo - SQLite user repository.

Implements UserRepository port.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from gitfit.domain.entities import User
from gitfit.infrastructure.persistence.connection import AsyncSQLiteConnection

logger = logging.getLogger(__name__)


class SQLiteUserRepository:
    """Async SQLite implementation of UserRepository."""

    def __init__(self, connection: AsyncSQLiteConnection):
        self._conn = connection

    async def save(self, user: User) -> int:
        async with self._conn.acquire() as conn:
            cursor = await conn.execute(
                "INSERT INTO users (user_name, first_name, last_name, created_at) VALUES (?, ?, ?, ?)",
                (user.user_name, user.first_name, user.last_name,
                 datetime.now().isoformat(timespec="seconds")),
            )
            user_id = cursor.lastrowid
        logger.info("Created user %d (%s)", user_id, user.user_name)
        return user_id

    async def get_by_id(self, user_id: int) -> Optional[User]:
        async with self._conn.acquire() as conn:
            async with conn.execute(
                "SELECT id, user_name, first_name, last_name, created_at FROM users WHERE id = ?",
                (user_id,),
            ) as cursor:
                row = await cursor.fetchone()
        return User(**dict(row)) if row is not None else None
