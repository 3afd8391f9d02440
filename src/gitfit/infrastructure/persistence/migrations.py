"""
infrastructure.persistence.migrations - Database schema creation.

Called once at startup by the REST lifespan hook or the CLI.
"""

from __future__ import annotations

import logging

from gitfit.infrastructure.persistence.connection import AsyncSQLiteConnection

logger = logging.getLogger(__name__)

_TABLES = [
    """CREATE TABLE IF NOT EXISTS users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_name TEXT UNIQUE,
        first_name TEXT NOT NULL DEFAULT '',
        last_name TEXT NOT NULL DEFAULT '',
        created_at TEXT
    )""",
    """CREATE TABLE IF NOT EXISTS credentials (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER NOT NULL UNIQUE,
        login TEXT NOT NULL UNIQUE,
        password_hash TEXT NOT NULL,
        created_at TEXT,
        FOREIGN KEY (user_id) REFERENCES users(id)
    )""",
    """CREATE TABLE IF NOT EXISTS profiles (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER NOT NULL,
        height_in REAL,
        current_weight REAL,
        goal_weight REAL,
        birth_date TEXT,
        activity_level TEXT,
        daily_calorie_goal INTEGER,
        daily_water_goal INTEGER,
        created_at TEXT,
        FOREIGN KEY (user_id) REFERENCES users(id)
    )""",
    """CREATE TABLE IF NOT EXISTS food_entries (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id INTEGER NOT NULL,
        name TEXT NOT NULL,
        calories REAL NOT NULL,
        fat REAL NOT NULL,
        protein REAL NOT NULL,
        carbs REAL NOT NULL,
        meal_type TEXT,
        meal_date TEXT NOT NULL,
        servings REAL NOT NULL,
        ndbno TEXT,
        FOREIGN KEY (user_id) REFERENCES users(id)
    )""",
    "CREATE INDEX IF NOT EXISTS idx_food_entries_user_date ON food_entries(user_id, meal_date)",
    """CREATE TABLE IF NOT EXISTS water_entries (
        user_id INTEGER NOT NULL,
        entry_date TEXT NOT NULL,
        FOREIGN KEY (user_id) REFERENCES users(id)
    )""",
    "CREATE INDEX IF NOT EXISTS idx_water_entries_user_date ON water_entries(user_id, entry_date)",
]


async def run_migrations(connection: AsyncSQLiteConnection) -> None:
    """Create all tables if they don't exist.

    Safe to call multiple times (uses IF NOT EXISTS).
    """
    async with connection.acquire() as conn:
        for ddl in _TABLES:
            await conn.execute(ddl)
    logger.info("All tables created (or already exist).")
