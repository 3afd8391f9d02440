"""
application.services.tracking - Food and water logging.

Wraps the food repository with the rules the adapters share: entries are
always scoped to the calling user, a range must run forwards, and a delete
only succeeds against the caller's own entry.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from gitfit.domain.entities import FoodEntry
from gitfit.domain.exceptions import EntryNotFoundError, InvalidDateRangeError
from gitfit.domain.ports import FoodRepository, ProfileRepository
from gitfit.application.context import SessionContext
from gitfit.application.dto import DailySummary, NutritionTotals
from gitfit.application.services.profile import DEFAULT_CALORIE_GOAL, DEFAULT_WATER_GOAL

logger = logging.getLogger(__name__)


def compute_totals(entries: list[FoodEntry]) -> NutritionTotals:
    """Sum nutrients across entries, scaling each by its servings."""
    calories = fat = protein = carbs = 0.0
    for entry in entries:
        servings = entry.servings or 0.0
        calories += entry.calories * servings
        fat += entry.fat * servings
        protein += entry.protein * servings
        carbs += entry.carbohydrates * servings
    return NutritionTotals(
        calories=round(calories, 1),
        fat=round(fat, 1),
        protein=round(protein, 1),
        carbohydrates=round(carbs, 1),
    )


class TrackingService:
    """Food and water tracking for the current user."""

    def __init__(
        self,
        food_repo: FoodRepository,
        profile_repo: ProfileRepository,
    ):
        self._food_repo = food_repo
        self._profile_repo = profile_repo

    async def log_food(self, ctx: SessionContext, entry: FoodEntry) -> int:
        entry.user_id = ctx.user_id
        return await self._food_repo.add_food_item(ctx.user_id, entry)

    async def list_food(
        self,
        ctx: SessionContext,
        start: Optional[date] = None,
        finish: Optional[date] = None,
    ) -> list[FoodEntry]:
        """Lifetime entries, or only those within [start, finish] when both are given."""
        if start is None and finish is None:
            return await self._food_repo.get_lifetime_food_entries(ctx.user_id)
        if start is None or finish is None:
            raise InvalidDateRangeError("Both start and finish are required for a range.")
        if start > finish:
            raise InvalidDateRangeError(f"Range start {start} is after finish {finish}.")
        return await self._food_repo.get_food_entries_in_range(ctx.user_id, start, finish)

    async def get_food(self, ctx: SessionContext, entry_id: int) -> FoodEntry:
        """One of the caller's entries. Other users' entries read as missing."""
        entry = await self._food_repo.get_food_entry(entry_id)
        if entry is None or entry.user_id != ctx.user_id:
            raise EntryNotFoundError(f"Food entry {entry_id} not found.")
        return entry

    async def remove_food(self, ctx: SessionContext, entry_id: int) -> None:
        removed = await self._food_repo.remove_food_item(entry_id, ctx.user_id)
        if not removed:
            raise EntryNotFoundError(f"Food entry {entry_id} not found.")

    async def log_water(self, ctx: SessionContext) -> None:
        await self._food_repo.add_water_entry(ctx.user_id)

    async def water_count(self, ctx: SessionContext, day: date) -> int:
        return await self._food_repo.get_water_count_by_date(ctx.user_id, day)

    async def daily_summary(self, ctx: SessionContext, day: date) -> DailySummary:
        """Totals for ``day`` measured against the latest profile goals."""
        entries = await self._food_repo.get_food_entries_in_range(ctx.user_id, day, day)
        cups = await self._food_repo.get_water_count_by_date(ctx.user_id, day)
        profile = await self._profile_repo.get_latest(ctx.user_id)

        summary = DailySummary(
            day=day,
            totals=compute_totals(entries),
            entry_count=len(entries),
            water_cups=cups,
            calorie_goal=profile.daily_calorie_goal if profile else DEFAULT_CALORIE_GOAL,
            water_goal=profile.daily_water_goal if profile else DEFAULT_WATER_GOAL,
        )
        logger.debug(
            "Summary for user %d on %s: %d entries, %d cups",
            ctx.user_id, day, summary.entry_count, summary.water_cups,
        )
        return summary
