"""
factory - Composition root for GitFit.

ALL dependency wiring happens here. No other module constructs its own
dependencies. Adapters (CLI, REST) call this factory to get fully
configured services and repositories.

Usage:
    from gitfit.factory import ServiceFactory
    from gitfit.infrastructure.config import Settings

    config = Settings.from_env()
    factory = ServiceFactory(config)
    await factory.initialize()  # one-time startup

    service = factory.create_tracking_service()
    entries = await service.list_food(ctx)
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from gitfit.infrastructure.config import Settings
from gitfit.infrastructure.persistence.connection import AsyncSQLiteConnection
from gitfit.infrastructure.persistence.migrations import run_migrations
from gitfit.infrastructure.persistence.user_repo import SQLiteUserRepository
from gitfit.infrastructure.persistence.credentials_repo import SQLiteCredentialsRepository
from gitfit.infrastructure.persistence.profile_repo import SQLiteProfileRepository
from gitfit.infrastructure.persistence.food_repo import SQLiteFoodRepository
from gitfit.application.services.authentication import AuthenticationService
from gitfit.application.services.profile import ProfileService
from gitfit.application.services.tracking import TrackingService

logger = logging.getLogger(__name__)


class ServiceFactory:
    """Composition root: wires all dependencies together.

    Call initialize() once at startup, then create services as needed.

    Args:
        config: Application settings.
        today:  Clock used to date new food and water entries.
    """

    def __init__(self, config: Settings, today: Callable[[], date] = date.today):
        self._config = config
        self._connection = AsyncSQLiteConnection(config.db_path)
        self._today = today
        self._initialized = False

    @property
    def config(self) -> Settings:
        return self._config

    def today(self) -> date:
        """The date new entries are stamped with."""
        return self._today()

    async def initialize(self) -> None:
        """One-time startup: run migrations."""
        logger.info("Initializing ServiceFactory (db=%s)...", self._config.db_path)
        await run_migrations(self._connection)
        self._initialized = True
        logger.info("ServiceFactory ready")

    # ------------------------------------------------------------------
    # Service creation
    # ------------------------------------------------------------------

    def create_authentication_service(self) -> AuthenticationService:
        """Create an AuthenticationService with all dependencies wired."""
        return AuthenticationService(
            user_repo=SQLiteUserRepository(self._connection),
            credentials_repo=SQLiteCredentialsRepository(self._connection),
            secret=self._config.jwt_secret,
            expiry_hours=self._config.jwt_expiry_hours,
        )

    def create_profile_service(self) -> ProfileService:
        return ProfileService(
            profile_repo=SQLiteProfileRepository(self._connection),
        )

    def create_tracking_service(self) -> TrackingService:
        self._ensure_initialized()
        return TrackingService(
            food_repo=self.create_food_repository(),
            profile_repo=SQLiteProfileRepository(self._connection),
        )

    def create_user_repository(self) -> SQLiteUserRepository:
        """Return a user repository for direct user entity lookups."""
        return SQLiteUserRepository(self._connection)

    def create_food_repository(self) -> SQLiteFoodRepository:
        return SQLiteFoodRepository(self._connection, today=self._today)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError("ServiceFactory.initialize() must be awaited first.")
