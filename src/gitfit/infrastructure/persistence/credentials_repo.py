"""
infrastructure.persistence.credentials_repo - Login names and password hashes.

Implements CredentialsRepository port. Rows are never updated; a user who
registers gets exactly one.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from gitfit.domain.entities import Credentials
from gitfit.infrastructure.persistence.connection import AsyncSQLiteConnection

logger = logging.getLogger(__name__)

_COLUMNS = "id, user_id, login, password_hash, created_at"


class SQLiteCredentialsRepository:
    """Async SQLite implementation of CredentialsRepository."""

    def __init__(self, connection: AsyncSQLiteConnection):
        self._conn = connection

    async def add(self, credentials: Credentials) -> int:
        async with self._conn.acquire() as conn:
            cursor = await conn.execute(
                "INSERT INTO credentials (user_id, login, password_hash, created_at) VALUES (?, ?, ?, ?)",
                (
                    credentials.user_id,
                    credentials.login,
                    credentials.password_hash,
                    datetime.now().isoformat(timespec="seconds"),
                ),
            )
            credentials_id = cursor.lastrowid
        logger.debug("Stored credentials %d for user %d", credentials_id, credentials.user_id)
        return credentials_id

    async def find_by_login(self, login: str) -> Optional[Credentials]:
        async with self._conn.acquire() as conn:
            async with conn.execute(
                f"SELECT {_COLUMNS} FROM credentials WHERE login = ?", (login,),
            ) as cursor:
                row = await cursor.fetchone()
        return Credentials(**dict(row)) if row is not None else None
