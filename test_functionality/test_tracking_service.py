"""
Test TrackingService and ProfileService on top of the SQLite repositories.
"""
import asyncio
from datetime import date

import pytest

from gitfit.application.context import SessionContext
from gitfit.application.services.tracking import compute_totals
from gitfit.domain.entities import FoodEntry, Profile
from gitfit.domain.exceptions import EntryNotFoundError, InvalidDateRangeError


def test_compute_totals_scales_by_servings():
    totals = compute_totals([
        FoodEntry(calories=100, fat=1, protein=2, carbohydrates=3, servings=2),
        FoodEntry(calories=55.5, fat=0.5, protein=0, carbohydrates=10, servings=1),
    ])
    assert totals.calories == 255.5
    assert totals.fat == 2.5
    assert totals.protein == 4.0
    assert totals.carbohydrates == 16.0


def test_compute_totals_empty():
    totals = compute_totals([])
    assert (totals.calories, totals.fat, totals.protein, totals.carbohydrates) == (0, 0, 0, 0)


def test_list_food_lifetime_and_range(factory, clock, user_id):
    service = factory.create_tracking_service()
    ctx = SessionContext(user_id=user_id)
    first = asyncio.run(service.log_food(ctx, FoodEntry(name="Eggs", calories=140, servings=1)))
    clock.day = date(2024, 3, 5)
    second = asyncio.run(service.log_food(ctx, FoodEntry(name="Rice", calories=200, servings=1)))

    assert {e.id for e in asyncio.run(service.list_food(ctx))} == {first, second}
    in_range = asyncio.run(service.list_food(ctx, date(2024, 3, 2), date(2024, 3, 5)))
    assert [e.id for e in in_range] == [second]


def test_list_food_rejects_backwards_or_half_open_range(factory, user_id):
    service = factory.create_tracking_service()
    ctx = SessionContext(user_id=user_id)

    with pytest.raises(InvalidDateRangeError):
        asyncio.run(service.list_food(ctx, date(2024, 3, 5), date(2024, 3, 1)))
    with pytest.raises(InvalidDateRangeError):
        asyncio.run(service.list_food(ctx, start=date(2024, 3, 1)))


def test_remove_food_of_another_user_is_not_found(factory, user_id, other_user_id):
    service = factory.create_tracking_service()
    owner = SessionContext(user_id=user_id)
    entry_id = asyncio.run(service.log_food(owner, FoodEntry(name="Apple", calories=95)))

    with pytest.raises(EntryNotFoundError):
        asyncio.run(service.remove_food(SessionContext(user_id=other_user_id), entry_id))

    asyncio.run(service.remove_food(owner, entry_id))
    assert asyncio.run(service.list_food(owner)) == []


def test_daily_summary_uses_defaults_without_profile(factory, clock, user_id):
    service = factory.create_tracking_service()
    ctx = SessionContext(user_id=user_id)
    asyncio.run(service.log_food(ctx, FoodEntry(name="Pasta", calories=400, protein=14, servings=1.5)))
    asyncio.run(service.log_water(ctx))
    asyncio.run(service.log_water(ctx))

    summary = asyncio.run(service.daily_summary(ctx, clock.day))

    assert summary.entry_count == 1
    assert summary.totals.calories == 600.0
    assert summary.totals.protein == 21.0
    assert summary.water_cups == 2
    assert summary.calorie_goal == 2000
    assert summary.water_goal == 8
    assert summary.calories_remaining == 1400.0
    assert summary.water_remaining == 6


def test_daily_summary_uses_latest_profile_goals(factory, clock, user_id):
    ctx = SessionContext(user_id=user_id)
    profiles = factory.create_profile_service()
    asyncio.run(profiles.save_profile(ctx, Profile(daily_calorie_goal=2500, daily_water_goal=10)))
    asyncio.run(profiles.save_profile(ctx, Profile(daily_calorie_goal=1800, daily_water_goal=6)))

    summary = asyncio.run(factory.create_tracking_service().daily_summary(ctx, clock.day))

    assert summary.calorie_goal == 1800
    assert summary.water_goal == 6
    assert summary.entry_count == 0


def test_daily_summary_keeps_zero_goals(factory, clock, user_id):
    ctx = SessionContext(user_id=user_id)
    profiles = factory.create_profile_service()
    asyncio.run(profiles.save_profile(ctx, Profile(daily_calorie_goal=0, daily_water_goal=0)))

    current = asyncio.run(profiles.get_current_profile(ctx))
    summary = asyncio.run(factory.create_tracking_service().daily_summary(ctx, clock.day))

    assert (summary.calorie_goal, summary.water_goal) == (0, 0)
    assert summary.water_goal == current.daily_water_goal
    assert summary.water_remaining == 0
    assert summary.calories_remaining == 0


def test_get_food_only_returns_own_entries(factory, user_id, other_user_id):
    service = factory.create_tracking_service()
    owner = SessionContext(user_id=user_id)
    entry_id = asyncio.run(service.log_food(owner, FoodEntry(name="Pear", calories=100)))

    assert asyncio.run(service.get_food(owner, entry_id)).name == "Pear"
    with pytest.raises(EntryNotFoundError):
        asyncio.run(service.get_food(SessionContext(user_id=other_user_id), entry_id))
    with pytest.raises(EntryNotFoundError):
        asyncio.run(service.get_food(owner, entry_id + 100))


def test_profile_history_newest_first(factory, user_id):
    ctx = SessionContext(user_id=user_id)
    profiles = factory.create_profile_service()

    assert asyncio.run(profiles.get_profile_history(ctx)) == []
    default = asyncio.run(profiles.get_current_profile(ctx))
    assert default.id is None
    assert default.daily_calorie_goal == 2000

    asyncio.run(profiles.save_profile(ctx, Profile(current_weight=180)))
    asyncio.run(profiles.save_profile(ctx, Profile(current_weight=175)))

    history = asyncio.run(profiles.get_profile_history(ctx))
    assert [p.current_weight for p in history] == [175, 180]
    assert asyncio.run(profiles.get_current_profile(ctx)).current_weight == 175


def test_tracking_service_requires_initialized_factory(settings):
    from gitfit.factory import ServiceFactory

    with pytest.raises(RuntimeError):
        ServiceFactory(settings).create_tracking_service()
