from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

WEEKDAYS = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)
MEAL_SLOTS = ("breakfast", "lunch", "dinner")


class Meal(BaseModel):
    id: int
    title: str
    description: str
    image_url: str | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DayPlan(BaseModel):
    # empty slot is an explicit None, never a missing key
    breakfast: Meal | None = None
    lunch: Meal | None = None
    dinner: Meal | None = None


class WeekPlan(BaseModel):
    monday: DayPlan = Field(default_factory=DayPlan)
    tuesday: DayPlan = Field(default_factory=DayPlan)
    wednesday: DayPlan = Field(default_factory=DayPlan)
    thursday: DayPlan = Field(default_factory=DayPlan)
    friday: DayPlan = Field(default_factory=DayPlan)
    saturday: DayPlan = Field(default_factory=DayPlan)
    sunday: DayPlan = Field(default_factory=DayPlan)


def normalize_day(day: str) -> str:
    """Return the canonical weekday key or raise ValueError."""
    key = day.strip().lower()
    if key not in WEEKDAYS:
        raise ValueError(f"unknown day {day!r}; expected one of {', '.join(WEEKDAYS)}")
    return key
