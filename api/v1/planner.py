# api/v1/planner.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.v1.deps import get_planner
from api.v1.schemas import DayPlanIn
from core.errors import PlanGenerationError
from core.models import DayPlan, WeekPlan
from core.planner import MealPlanner

_LOG = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/generate-day",
    response_model=DayPlan,
    response_model_exclude_none=True,
    summary="Breakfast, lunch and dinner for one weekday",
)
async def generate_day(
    body: DayPlanIn,
    planner: MealPlanner = Depends(get_planner),
) -> DayPlan:
    return await planner.plan_day(body.day)


@router.post(
    "/generate-week",
    response_model=WeekPlan,
    summary="Seven sequential day plans; fails as a whole if any day fails",
)
async def generate_week(planner: MealPlanner = Depends(get_planner)) -> WeekPlan:
    try:
        return await planner.plan_week()
    except PlanGenerationError as exc:
        _LOG.warning("week plan aborted: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Week plan generation failed on {exc.day}",
        )
