from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from core.models import normalize_day


class DayPlanIn(BaseModel):
    day: str = Field(..., examples=["monday"])

    @field_validator("day")
    @classmethod
    def _weekday(cls, v: str) -> str:
        return normalize_day(v)
