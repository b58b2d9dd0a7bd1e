"""
`python -m workers.generate_weekly_plan [--out meal_plan.json]`

Generate Monday → Sunday in one go and overwrite the stored week plan.
Run as a cron / Cloud Run Job later.
"""
import argparse
import asyncio
import logging

from config import settings
from core.errors import PlanGenerationError
from core.models import MEAL_SLOTS, WEEKDAYS, WeekPlan
from core.planner import MealPlanner
from services.gemini import client_from_settings
from services.plan_store import WeekPlanStore


async def _generate() -> WeekPlan:
    planner = MealPlanner(client_from_settings())
    return await planner.plan_week()


def _print_plan(plan: WeekPlan) -> None:
    for day in WEEKDAYS:
        menu = getattr(plan, day)
        titles = [getattr(menu, slot).title if getattr(menu, slot) else "-" for slot in MEAL_SLOTS]
        print(f"{day:<10} " + " | ".join(titles))


def _run(out: str) -> None:
    try:
        plan = asyncio.run(_generate())
    except PlanGenerationError as exc:
        # nothing is written: the previous plan stays intact
        raise SystemExit(f"✗ {exc}")

    WeekPlanStore(out).save(plan)
    _print_plan(plan)
    print(f"✓ week plan written to {out}")


def main() -> None:
    logging.basicConfig(level=settings.log_level.upper())
    ap = argparse.ArgumentParser()
    ap.add_argument("--out", default=settings.plan_store_path)
    _run(ap.parse_args().out)


if __name__ == "__main__":
    main()
