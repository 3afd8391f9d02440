"""Shared fixtures: a throwaway SQLite database and a pinned clock."""

import asyncio
from datetime import date

import pytest

from gitfit.application.dto import RegisterRequest
from gitfit.factory import ServiceFactory
from gitfit.infrastructure.config import Settings


class FixedClock:
    """Stand-in for date.today that tests can move forward."""

    def __init__(self, day: date):
        self.day = day

    def __call__(self) -> date:
        return self.day


@pytest.fixture
def clock():
    return FixedClock(date(2024, 3, 1))


@pytest.fixture
def settings(tmp_path):
    return Settings(db_path=str(tmp_path / "gitfit-test.db"), jwt_secret="test-secret")


@pytest.fixture
def factory(settings, clock):
    f = ServiceFactory(settings, today=clock)
    asyncio.run(f.initialize())
    return f


def register(factory: ServiceFactory, login: str, password: str = "secret123") -> int:
    token = asyncio.run(
        factory.create_authentication_service().register(
            RegisterRequest(login=login, password=password)
        )
    )
    return token.user_id


@pytest.fixture
def user_id(factory):
    return register(factory, "alice")


@pytest.fixture
def other_user_id(factory):
    return register(factory, "bob")
