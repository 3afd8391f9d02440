"""
domain.entities - Persistence-aware types (have IDs, timestamps).

Plain dataclasses decoupled from any persistence strategy. No SQL concerns,
no DB imports. Timestamps are set by the repository implementations, not by
the entities themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass
class User:
    """Someone who tracks food. ``user_name`` mirrors the login name."""
    id: Optional[int] = None
    user_name: str = ""
    first_name: str = ""
    last_name: str = ""
    created_at: str = ""


@dataclass
class Credentials:
    """Login name and bcrypt hash. One row per user."""
    id: Optional[int] = None
    user_id: Optional[int] = None
    login: str = ""
    password_hash: str = ""
    created_at: str = ""


@dataclass
class Profile:
    """Fitness profile snapshot. The newest row per user is the current one."""
    id: Optional[int] = None
    user_id: Optional[int] = None
    height_in: float = 0.0
    current_weight: float = 0.0
    goal_weight: float = 0.0
    birth_date: str = ""
    activity_level: str = ""
    daily_calorie_goal: int = 2000
    daily_water_goal: int = 8  # 8 oz. cups
    created_at: str = ""


@dataclass
class FoodEntry:
    """One logged food item.

    ``ndbno`` is the USDA nutrient database number the client looked the
    food up by; empty when the food was entered by hand.
    """
    id: Optional[int] = None
    user_id: Optional[int] = None
    name: str = ""
    calories: float = 0.0
    fat: float = 0.0
    protein: float = 0.0
    carbohydrates: float = 0.0
    meal_type: str = ""
    servings: float = 1.0
    date: Optional[date] = None
    ndbno: str = ""

