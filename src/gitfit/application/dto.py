"""
application.dto - Data Transfer Objects for service input/output.

These are the structured results that services return to callers
(REST endpoints, CLI adapter).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class RegisterRequest:
    """Input for user registration."""
    login: str
    password: str
    first_name: str = ""
    last_name: str = ""


@dataclass(frozen=True)
class LoginRequest:
    """Input for user login."""
    login: str
    password: str


@dataclass(frozen=True)
class AuthToken:
    """A signed session: who the bearer is and until when."""
    access_token: str
    user_id: int
    login: str
    expires_at: datetime
    token_type: str = "bearer"


@dataclass(frozen=True)
class NutritionTotals:
    """Summed nutrients for a set of food entries (servings applied)."""
    calories: float = 0.0
    fat: float = 0.0
    protein: float = 0.0
    carbohydrates: float = 0.0


@dataclass(frozen=True)
class DailySummary:
    """One day of tracking measured against the user's current goals."""
    day: date
    totals: NutritionTotals
    entry_count: int
    water_cups: int
    calorie_goal: int
    water_goal: int

    @property
    def calories_remaining(self) -> float:
        return round(self.calorie_goal - self.totals.calories, 1)

    @property
    def water_remaining(self) -> int:
        return max(self.water_goal - self.water_cups, 0)
