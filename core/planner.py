"""
core/planner.py
────────────────────────────────────────────────────────────────────────
Meal-planner generation.

* `plan_day()`  – breakfast / lunch / dinner for one weekday; falls back
                  to a fixed trio unless called with `strict=True`.
* `plan_week()` – Monday → Sunday, one strict Gemini call at a time.
                  The first failing day aborts the week; no partial week
                  is ever returned.
"""
from __future__ import annotations

import logging

from pydantic import BaseModel, Field, ValidationError

from core.errors import PlanGenerationError
from core.fallbacks import FALLBACK_DAY_MEALS
from core.json_extract import Err
from core.models import MEAL_SLOTS, WEEKDAYS, DayPlan, Meal, WeekPlan, normalize_day
from services.gemini import TextGenerator, request_json

_LOG = logging.getLogger(__name__)

# reserved id range for planner meals: 2000 + 3*weekday + slot
PLAN_MEAL_ID_BASE = 2000


class _MealIdea(BaseModel):
    title: str = Field(..., min_length=1)
    description: str


class _DayPayload(BaseModel):
    breakfast: _MealIdea
    lunch: _MealIdea
    dinner: _MealIdea


def build_day_prompt(day: str) -> str:
    return (
        f"Plan a balanced menu for {day.capitalize()}: one breakfast, one lunch "
        "and one dinner. Vary cuisines and keep each dish realistic for a home cook.\n"
        "Return ONLY a JSON object shaped like:\n"
        "{\n"
        '  "breakfast": {"title": "...", "description": "one sentence"},\n'
        '  "lunch": {"title": "...", "description": "one sentence"},\n'
        '  "dinner": {"title": "...", "description": "one sentence"}\n'
        "}"
    )


def fallback_day() -> DayPlan:
    return DayPlan(**{slot: FALLBACK_DAY_MEALS[slot] for slot in MEAL_SLOTS})


class MealPlanner:
    def __init__(self, llm: TextGenerator) -> None:
        self._llm = llm

    async def plan_day(self, day: str, strict: bool = False) -> DayPlan:
        day = normalize_day(day)
        result = await request_json(self._llm, build_day_prompt(day))

        reason: str | None = None
        payload: _DayPayload | None = None
        if isinstance(result, Err):
            reason = result.reason
        else:
            try:
                payload = _DayPayload.model_validate(result.value)
            except ValidationError as exc:
                reason = f"invalid day plan JSON ({exc.error_count()} errors)"

        if payload is None:
            if strict:
                raise PlanGenerationError(day, reason or "unknown")
            _LOG.warning("day plan for %s falling back: %s", day, reason)
            return fallback_day()

        base = PLAN_MEAL_ID_BASE + 3 * WEEKDAYS.index(day)
        return DayPlan(
            **{
                slot: Meal(
                    id=base + i,
                    title=getattr(payload, slot).title,
                    description=getattr(payload, slot).description,
                )
                for i, slot in enumerate(MEAL_SLOTS)
            }
        )

    async def plan_week(self) -> WeekPlan:
        days: dict[str, DayPlan] = {}
        for day in WEEKDAYS:
            # one call in flight at a time
            days[day] = await self.plan_day(day, strict=True)
            _LOG.debug("planned %s", day)
        return WeekPlan(**days)
