"""
domain.ports - Abstract interfaces (Protocols) for all system boundaries.

These define WHAT the system needs without specifying HOW. Infrastructure
modules provide concrete implementations. Application services depend only
on these protocols, never on concrete classes.

Using typing.Protocol (structural typing) instead of ABC: any class that
implements the methods satisfies the port without explicit inheritance.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol, runtime_checkable

from gitfit.domain.entities import (
    User,
    Credentials,
    Profile,
    FoodEntry,
)


# ---------------------------------------------------------------------------
# Repository Ports
# ---------------------------------------------------------------------------

@runtime_checkable
class UserRepository(Protocol):
    """Account records."""

    async def get_by_id(self, user_id: int) -> User | None: ...
    async def save(self, user: User) -> int: ...


@runtime_checkable
class CredentialsRepository(Protocol):
    """Login lookups. Credentials are written once, at registration."""

    async def add(self, credentials: Credentials) -> int: ...
    async def find_by_login(self, login: str) -> Credentials | None: ...


@runtime_checkable
class ProfileRepository(Protocol):
    """Fitness profile snapshots, newest first."""

    async def save(self, profile: Profile) -> int: ...
    async def get_by_user(self, user_id: int) -> list[Profile]: ...
    async def get_latest(self, user_id: int) -> Profile | None: ...


@runtime_checkable
class FoodRepository(Protocol):
    """Food and water entry storage."""

    async def get_lifetime_food_entries(self, user_id: int) -> list[FoodEntry]: ...
    async def get_food_entries_in_range(
        self, user_id: int, start: date, finish: date,
    ) -> list[FoodEntry]: ...
    async def get_food_entry(self, entry_id: int) -> FoodEntry | None: ...
    async def add_food_item(self, user_id: int, entry: FoodEntry) -> int: ...
    async def remove_food_item(self, entry_id: int, user_id: int | None = None) -> bool: ...
    async def add_water_entry(self, user_id: int) -> None: ...
    async def get_water_count_by_date(self, user_id: int, query_date: date) -> int: ...
