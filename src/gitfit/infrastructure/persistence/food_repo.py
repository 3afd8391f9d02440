"""
infrastructure.persistence.food_repo - SQLite food and water entry repository.

Implements FoodRepository port. One parameterized statement per call, each
on its own connection. Storage errors are not caught here; the connection
helper rolls back, logs and re-raises them unchanged.

Dates are stored as ISO ``YYYY-MM-DD`` text so ``BETWEEN`` is an inclusive
range on both ends.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional

from gitfit.domain.entities import FoodEntry
from gitfit.infrastructure.persistence.connection import AsyncSQLiteConnection

logger = logging.getLogger(__name__)


class SQLiteFoodRepository:
    """Async SQLite implementation of FoodRepository.

    Args:
        connection: Connection provider shared with the other repositories.
        today:      Clock used to stamp new food and water rows. Defaults to
                    the local calendar date.
    """

    def __init__(
        self,
        connection: AsyncSQLiteConnection,
        today: Callable[[], date] = date.today,
    ):
        self._conn = connection
        self._today = today

    # ------------------------------------------------------------------
    # Food
    # ------------------------------------------------------------------

    async def get_lifetime_food_entries(self, user_id: int) -> list[FoodEntry]:
        """Return every food entry the user has logged, in store order."""
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                "SELECT * FROM food_entries WHERE user_id = ?",
                (user_id,),
            )
        logger.debug("Loaded %d lifetime food entries for user %d", len(rows), user_id)
        return [self._row_to_entry(r) for r in rows]

    async def get_food_entries_in_range(
        self, user_id: int, start: date, finish: date,
    ) -> list[FoodEntry]:
        """Return the user's entries dated within [start, finish]."""
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                """SELECT * FROM food_entries
                   WHERE user_id = ? AND meal_date BETWEEN ? AND ?""",
                (user_id, start.isoformat(), finish.isoformat()),
            )
        logger.debug(
            "Loaded %d food entries for user %d in %s..%s",
            len(rows), user_id, start, finish,
        )
        return [self._row_to_entry(r) for r in rows]

    async def get_food_entry(self, entry_id: int) -> Optional[FoodEntry]:
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                "SELECT * FROM food_entries WHERE id = ?",
                (entry_id,),
            )
        return self._row_to_entry(rows[0]) if rows else None

    async def add_food_item(self, user_id: int, entry: FoodEntry) -> int:
        """Insert a food entry for the user and return its id.

        The row is always dated today; ``entry.date`` is ignored.
        """
        async with self._conn.acquire() as conn:
            cursor = await conn.execute(
                """INSERT INTO food_entries
                   (user_id, name, calories, fat, protein, carbs,
                    meal_type, meal_date, servings, ndbno)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
                (user_id, entry.name, entry.calories, entry.fat, entry.protein,
                 entry.carbohydrates, entry.meal_type, self._today().isoformat(),
                 entry.servings, entry.ndbno),
            )
            entry_id = cursor.lastrowid
        logger.info("User %d logged food entry %d (%s)", user_id, entry_id, entry.name)
        return entry_id

    async def remove_food_item(self, entry_id: int, user_id: Optional[int] = None) -> bool:
        """Delete an entry by id. Returns True if a row was removed.

        When ``user_id`` is given, only an entry owned by that user is deleted.
        """
        if user_id is None:
            sql, params = "DELETE FROM food_entries WHERE id = ?", (entry_id,)
        else:
            sql = "DELETE FROM food_entries WHERE id = ? AND user_id = ?"
            params = (entry_id, user_id)
        async with self._conn.acquire() as conn:
            cursor = await conn.execute(sql, params)
            removed = cursor.rowcount > 0
        if removed:
            logger.info("Removed food entry %d", entry_id)
        return removed

    # ------------------------------------------------------------------
    # Water
    # ------------------------------------------------------------------

    async def add_water_entry(self, user_id: int) -> None:
        """Record one 8 oz. cup of water for today."""
        async with self._conn.acquire() as conn:
            await conn.execute(
                "INSERT INTO water_entries (user_id, entry_date) VALUES (?, ?)",
                (user_id, self._today().isoformat()),
            )
        logger.info("User %d logged a cup of water", user_id)

    async def get_water_count_by_date(self, user_id: int, query_date: date) -> int:
        """Number of cups the user logged on ``query_date``."""
        async with self._conn.acquire() as conn:
            rows = await conn.execute_fetchall(
                "SELECT COUNT(*) FROM water_entries WHERE user_id = ? AND entry_date = ?",
                (user_id, query_date.isoformat()),
            )
        return int(rows[0][0]) if rows else 0

    @staticmethod
    def _row_to_entry(row) -> FoodEntry:
        return FoodEntry(
            id=row["id"],
            user_id=row["user_id"],
            name=row["name"] or "",
            calories=row["calories"] or 0.0,
            fat=row["fat"] or 0.0,
            protein=row["protein"] or 0.0,
            carbohydrates=row["carbs"] or 0.0,
            meal_type=row["meal_type"] or "",
            servings=row["servings"] or 0.0,
            date=date.fromisoformat(row["meal_date"]),
            ndbno=row["ndbno"] or "",
        )
