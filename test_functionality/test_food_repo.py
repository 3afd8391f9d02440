"""
Test the SQLite food and water repository against a real database file.
"""
import asyncio
import sqlite3
from datetime import date

import pytest

from gitfit.domain.entities import FoodEntry


def _oatmeal(**overrides) -> FoodEntry:
    fields = dict(
        name="Oatmeal", calories=150.0, fat=2.5, protein=5.0,
        carbohydrates=27.0, meal_type="breakfast", servings=1.5, ndbno="08121",
    )
    fields.update(overrides)
    return FoodEntry(**fields)


def test_added_entry_is_returned_with_todays_date(factory, clock, user_id):
    repo = factory.create_food_repository()
    entry = _oatmeal(date=date(2019, 1, 1))

    entry_id = asyncio.run(repo.add_food_item(user_id, entry))
    entries = asyncio.run(repo.get_lifetime_food_entries(user_id))

    assert [e.id for e in entries] == [entry_id]
    saved = entries[0]
    assert saved.user_id == user_id
    assert saved.name == "Oatmeal"
    assert saved.calories == 150.0
    assert saved.fat == 2.5
    assert saved.protein == 5.0
    assert saved.carbohydrates == 27.0
    assert saved.meal_type == "breakfast"
    assert saved.servings == 1.5
    assert saved.ndbno == "08121"
    assert saved.date == clock.day


def test_range_is_inclusive_and_scoped_to_user(factory, clock, user_id, other_user_id):
    repo = factory.create_food_repository()
    ids = {}
    for day in (date(2024, 3, 1), date(2024, 3, 2), date(2024, 3, 3), date(2024, 3, 4)):
        clock.day = day
        ids[day] = asyncio.run(repo.add_food_item(user_id, _oatmeal()))
        asyncio.run(repo.add_food_item(other_user_id, _oatmeal(name="Toast")))

    entries = asyncio.run(
        repo.get_food_entries_in_range(user_id, date(2024, 3, 2), date(2024, 3, 3))
    )

    assert sorted(e.id for e in entries) == sorted([ids[date(2024, 3, 2)], ids[date(2024, 3, 3)]])
    assert all(e.user_id == user_id for e in entries)


def test_single_day_range(factory, clock, user_id):
    repo = factory.create_food_repository()
    entry_id = asyncio.run(repo.add_food_item(user_id, _oatmeal()))

    entries = asyncio.run(repo.get_food_entries_in_range(user_id, clock.day, clock.day))

    assert [e.id for e in entries] == [entry_id]


def test_remove_deletes_entry(factory, user_id):
    repo = factory.create_food_repository()
    keep = asyncio.run(repo.add_food_item(user_id, _oatmeal()))
    drop = asyncio.run(repo.add_food_item(user_id, _oatmeal(name="Banana")))

    assert asyncio.run(repo.remove_food_item(drop)) is True

    remaining = asyncio.run(repo.get_lifetime_food_entries(user_id))
    assert [e.id for e in remaining] == [keep]
    assert asyncio.run(repo.get_food_entry(drop)) is None


def test_remove_with_owner_ignores_other_users_entry(factory, user_id, other_user_id):
    repo = factory.create_food_repository()
    entry_id = asyncio.run(repo.add_food_item(user_id, _oatmeal()))

    assert asyncio.run(repo.remove_food_item(entry_id, other_user_id)) is False
    assert asyncio.run(repo.get_food_entry(entry_id)) is not None

    assert asyncio.run(repo.remove_food_item(entry_id, user_id)) is True
    assert asyncio.run(repo.get_lifetime_food_entries(user_id)) == []


def test_remove_missing_entry_returns_false(factory):
    repo = factory.create_food_repository()
    assert asyncio.run(repo.remove_food_item(9999)) is False


def test_water_count_matches_cups_logged(factory, clock, user_id):
    repo = factory.create_food_repository()
    for _ in range(5):
        asyncio.run(repo.add_water_entry(user_id))
    clock.day = date(2024, 3, 2)
    asyncio.run(repo.add_water_entry(user_id))

    assert asyncio.run(repo.get_water_count_by_date(user_id, date(2024, 3, 1))) == 5
    assert asyncio.run(repo.get_water_count_by_date(user_id, date(2024, 3, 2))) == 1


def test_reads_for_user_without_rows_are_empty(factory, user_id):
    repo = factory.create_food_repository()

    assert asyncio.run(repo.get_lifetime_food_entries(user_id)) == []
    assert asyncio.run(
        repo.get_food_entries_in_range(user_id, date(2024, 1, 1), date(2024, 12, 31))
    ) == []
    assert asyncio.run(repo.get_water_count_by_date(user_id, date(2024, 3, 1))) == 0


def test_storage_errors_propagate(factory):
    repo = factory.create_food_repository()
    # No user 4242: the foreign key rejects the row.
    with pytest.raises(sqlite3.IntegrityError):
        asyncio.run(repo.add_food_item(4242, _oatmeal()))
