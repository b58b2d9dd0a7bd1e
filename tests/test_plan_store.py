import json

from core.models import DayPlan, Meal, WeekPlan
from services.plan_store import PLAN_KEY, WeekPlanStore


def _plan(title: str) -> WeekPlan:
    return WeekPlan(monday=DayPlan(lunch=Meal(id=1, title=title, description="d")))


def test_load_missing_file_returns_none(tmp_path):
    assert WeekPlanStore(tmp_path / "plan.json").load() is None


def test_save_then_load(tmp_path):
    store = WeekPlanStore(tmp_path / "plan.json")
    store.save(_plan("Soup"))
    loaded = store.load()
    assert loaded.monday.lunch.title == "Soup"
    assert loaded.monday.breakfast is None


def test_empty_slots_are_explicit_nulls(tmp_path):
    path = tmp_path / "plan.json"
    WeekPlanStore(path).save(WeekPlan())
    raw = json.loads(path.read_text())[PLAN_KEY]
    assert set(raw) == {"monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"}
    assert raw["sunday"] == {"breakfast": None, "lunch": None, "dinner": None}


def test_save_overwrites_wholesale_and_keeps_other_keys(tmp_path):
    path = tmp_path / "plan.json"
    path.write_text(json.dumps({"theme": "dark"}))
    store = WeekPlanStore(path)
    store.save(_plan("Soup"))
    store.save(WeekPlan(friday=DayPlan(dinner=Meal(id=2, title="Tacos", description="d"))))

    data = json.loads(path.read_text())
    assert data["theme"] == "dark"
    assert data[PLAN_KEY]["monday"]["lunch"] is None
    assert data[PLAN_KEY]["friday"]["dinner"]["title"] == "Tacos"


def test_clear(tmp_path):
    store = WeekPlanStore(tmp_path / "plan.json")
    store.save(_plan("Soup"))
    store.clear()
    assert store.load() is None
