"""
infrastructure.persistence.profile_repo - SQLite fitness profile repository.

Implements ProfileRepository port. Profiles are append-only snapshots;
the newest row is the user's current profile.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from gitfit.domain.entities import Profile
from gitfit.infrastructure.persistence.connection import AsyncSQLiteConnection

logger = logging.getLogger(__name__)


class SQLiteProfileRepository:
    """Async SQLite implementation of ProfileRepository."""

    def __init__(self, connection: AsyncSQLiteConnection):
        self._conn = connection

    async def save(self, profile: Profile) -> int:
        now = datetime.now().isoformat()
        async with self._conn.acquire() as conn:
            cursor = await conn.execute(
                """INSERT INTO profiles
                   (user_id, height_in, current_weight, goal_weight, birth_date,
                    activity_level, daily_calorie_goal, daily_water_goal, created_at)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)""",
                (profile.user_id, profile.height_in, profile.current_weight,
                 profile.goal_weight, profile.birth_date, profile.activity_level,
                 profile.daily_calorie_goal, profile.daily_water_goal, now),
            )
            return cursor.lastrowid

    async def get_by_user(self, user_id: int) -> list[Profile]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                "SELECT * FROM profiles WHERE user_id = ? ORDER BY created_at DESC, id DESC",
                (user_id,),
            )
            return [self._row_to_profile(r) for r in rows]

    async def get_latest(self, user_id: int) -> Optional[Profile]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                "SELECT * FROM profiles WHERE user_id = ? ORDER BY created_at DESC, id DESC LIMIT 1",
                (user_id,),
            )
            return self._row_to_profile(rows[0]) if rows else None

    @staticmethod
    def _row_to_profile(row) -> Profile:
        return Profile(
            id=row["id"], user_id=row["user_id"],
            height_in=row["height_in"] or 0.0,
            current_weight=row["current_weight"] or 0.0,
            goal_weight=row["goal_weight"] or 0.0,
            birth_date=row["birth_date"] or "",
            activity_level=row["activity_level"] or "",
            daily_calorie_goal=row["daily_calorie_goal"] or 0,
            daily_water_goal=row["daily_water_goal"] or 0,
            created_at=row["created_at"] or "",
        )
