"""Pydantic models for REST API request/response validation."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, Field

from gitfit.domain.entities import FoodEntry, Profile


# --- Auth ---

class RegisterBody(BaseModel):
    login: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6)
    first_name: str = ""
    last_name: str = ""


class LoginBody(BaseModel):
    login: str
    password: str


class RefreshBody(BaseModel):
    token: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: int
    login: str
    expires_at: dt.datetime


# --- Profile ---

class ProfileBody(BaseModel):
    height_in: float = Field(0.0, ge=0)
    current_weight: float = Field(0.0, ge=0)
    goal_weight: float = Field(0.0, ge=0)
    birth_date: str = ""
    activity_level: str = ""
    daily_calorie_goal: int = Field(2000, gt=0)
    daily_water_goal: int = Field(8, ge=0, description="8 oz. cups per day")

    def to_entity(self) -> Profile:
        return Profile(**self.model_dump())


class ProfileOut(BaseModel):
    height_in: float
    current_weight: float
    goal_weight: float
    birth_date: str
    activity_level: str
    daily_calorie_goal: int
    daily_water_goal: int
    created_at: str

    @classmethod
    def from_entity(cls, profile: Profile) -> ProfileOut:
        return cls(
            height_in=profile.height_in,
            current_weight=profile.current_weight,
            goal_weight=profile.goal_weight,
            birth_date=profile.birth_date,
            activity_level=profile.activity_level,
            daily_calorie_goal=profile.daily_calorie_goal,
            daily_water_goal=profile.daily_water_goal,
            created_at=profile.created_at,
        )


# --- Tracking ---

class FoodEntryBody(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    calories: float = Field(..., ge=0)
    fat: float = Field(0.0, ge=0)
    protein: float = Field(0.0, ge=0)
    carbohydrates: float = Field(0.0, ge=0)
    meal_type: str = Field("", max_length=32, description="e.g. breakfast, lunch, dinner, snack")
    servings: float = Field(1.0, gt=0)
    date: Optional[dt.date] = Field(None, description="Accepted but not stored; entries are dated on the day they are logged")
    ndbno: str = Field("", max_length=16, description="USDA nutrient database number")

    def to_entity(self) -> FoodEntry:
        return FoodEntry(**self.model_dump())


class FoodEntryOut(BaseModel):
    id: int
    name: str
    calories: float
    fat: float
    protein: float
    carbohydrates: float
    meal_type: str
    servings: float
    date: dt.date
    ndbno: str

    @classmethod
    def from_entity(cls, entry: FoodEntry) -> FoodEntryOut:
        return cls(
            id=entry.id,
            name=entry.name,
            calories=entry.calories,
            fat=entry.fat,
            protein=entry.protein,
            carbohydrates=entry.carbohydrates,
            meal_type=entry.meal_type,
            servings=entry.servings,
            date=entry.date,
            ndbno=entry.ndbno,
        )


class FoodCreatedOut(BaseModel):
    id: int


class WaterCountOut(BaseModel):
    date: dt.date
    cups: int


class TotalsOut(BaseModel):
    calories: float
    fat: float
    protein: float
    carbohydrates: float


class DailySummaryOut(BaseModel):
    date: dt.date
    totals: TotalsOut
    entry_count: int
    water_cups: int
    calorie_goal: int
    water_goal: int
    calories_remaining: float
    water_remaining: int
