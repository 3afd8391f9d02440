"""
application.services.profile - Fitness profile management.

Profiles are kept as history so weight progress can be charted; the most
recent snapshot carries the goals the tracking summary measures against.
"""

from __future__ import annotations

import logging

from gitfit.domain.entities import Profile
from gitfit.domain.ports import ProfileRepository
from gitfit.application.context import SessionContext

logger = logging.getLogger(__name__)

DEFAULT_CALORIE_GOAL = 2000
DEFAULT_WATER_GOAL = 8


class ProfileService:
    """Manages user fitness profile snapshots."""

    def __init__(self, profile_repo: ProfileRepository):
        self._profile_repo = profile_repo

    async def save_profile(self, ctx: SessionContext, profile: Profile) -> int:
        """Store ``profile`` as the user's newest snapshot."""
        profile.user_id = ctx.user_id
        profile_id = await self._profile_repo.save(profile)
        logger.info(
            "Saved profile %d for user %d (request=%s)",
            profile_id, ctx.user_id, ctx.request_id,
        )
        return profile_id

    async def get_profile_history(self, ctx: SessionContext) -> list[Profile]:
        """Retrieve all profile snapshots for the user (newest first)."""
        return await self._profile_repo.get_by_user(ctx.user_id)

    async def get_current_profile(self, ctx: SessionContext) -> Profile:
        """Latest snapshot, or a default profile if the user has none yet."""
        latest = await self._profile_repo.get_latest(ctx.user_id)
        if latest is not None:
            return latest
        logger.debug("No profile for user %d, using defaults", ctx.user_id)
        return Profile(
            user_id=ctx.user_id,
            daily_calorie_goal=DEFAULT_CALORIE_GOAL,
            daily_water_goal=DEFAULT_WATER_GOAL,
        )
