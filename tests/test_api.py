"""
HTTP surface via FastAPI's TestClient. Gemini is always the scripted fake,
so these run offline.
"""
import json

import numpy as np
from fastapi.testclient import TestClient

from core.fallbacks import CHAT_CHICKEN, FALLBACK_DAY_MEALS
from main import create_app
from services.gemini import GeminiUnavailable
from services.seed_data import SEED_RECIPES
from services.store import InMemoryRecipeStore
from fakes import DAY_JSON, RECIPE_JSON, FakeLLM, fenced


def _client(*replies) -> TestClient:
    app = create_app(
        store=InMemoryRecipeStore(seed=SEED_RECIPES),
        llm=FakeLLM(*replies),
        rng=np.random.default_rng(3),
    )
    return TestClient(app)


# ── browse / search ──────────────────────────────────────────────────
def test_health():
    r = _client().get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_list_and_fetch_recipes_use_camel_case():
    c = _client()
    recipes = c.get("/api/recipes").json()
    assert len(recipes) == len(SEED_RECIPES)

    r = c.get("/api/recipes/1")
    assert r.status_code == 200
    body = r.json()
    assert body["title"] == "Mediterranean Chicken Salad"
    for key in ("prepTime", "cookTime", "nutritionFacts", "isAIGenerated", "createdAt", "imageUrl"):
        assert key in body
    assert "isSaved" not in body


def test_fetch_unknown_recipe_404():
    assert _client().get("/api/recipes/999").status_code == 404


def test_search_with_filters_csv():
    c = _client()
    everything = c.get("/api/recipes/search").json()
    assert len(everything) == len(SEED_RECIPES)

    hits = c.get("/api/recipes/search", params={"q": "", "filters": "vegetarian, quick"}).json()
    assert [h["title"] for h in hits] == ["Quick Vegetable Stir Fry", "Creamy Garlic Parmesan Pasta"]

    hits = c.get("/api/recipes/search", params={"q": "salmon"}).json()
    assert [h["title"] for h in hits] == ["Baked Salmon with Asparagus"]


def test_similar():
    c = _client()
    sims = c.get("/api/recipes/1/similar", params={"limit": 2}).json()
    assert len(sims) == 2
    assert 1 not in [s["id"] for s in sims]
    # Baked Salmon shares "Gluten-Free"
    assert sims[0]["id"] == 2
    assert c.get("/api/recipes/999/similar").json() == []


# ── saved recipes ────────────────────────────────────────────────────
def test_save_conflict_unsave_resave():
    c = _client()
    r = c.post("/api/recipes/saved", json={"recipeId": 2})
    assert r.status_code == 201
    assert r.json()["recipeId"] == 2
    assert r.json()["userId"] == 1

    assert c.post("/api/recipes/saved", json={"recipeId": 2}).status_code == 409

    saved = c.get("/api/recipes/saved").json()
    assert [s["id"] for s in saved] == [2]
    assert saved[0]["isSaved"] is True

    assert c.delete("/api/recipes/saved/2").status_code == 204
    assert c.get("/api/recipes/saved").json() == []
    assert c.post("/api/recipes/saved", json={"recipeId": 2}).status_code == 201


def test_save_unknown_recipe_404():
    assert _client().post("/api/recipes/saved", json={"recipeId": 42}).status_code == 404


def test_save_validation_error_400():
    r = _client().post("/api/recipes/saved", json={})
    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Invalid request data"
    assert body["errors"]


# ── AI endpoints ─────────────────────────────────────────────────────
def test_generate_with_gemini_reply():
    c = _client(fenced(RECIPE_JSON))
    r = c.post("/api/recipes/generate", json={"description": "chickpea curry", "cookingTime": 30})
    assert r.status_code == 201
    body = r.json()
    assert body["title"] == "Spicy Chickpea Curry"
    assert body["cookTime"] == 30
    assert body["isAIGenerated"] is True
    # persisted and browsable
    assert c.get(f"/api/recipes/{body['id']}").json()["title"] == "Spicy Chickpea Curry"


def test_generate_fallback_when_unavailable():
    r = _client().post(
        "/api/recipes/generate",
        json={"description": "chicken", "dietaryPreferences": ["Gluten-Free"], "cookingTime": 20},
    )
    assert r.status_code == 201
    body = r.json()
    assert body["title"] == "Lemon Herb Roasted Chicken"
    assert body["cookTime"] <= 20
    assert "Gluten-Free" in body["tags"]
    assert 1 <= len(body["tags"]) <= 5


def test_generate_validation_400():
    c = _client()
    assert c.post("/api/recipes/generate", json={}).status_code == 400
    assert c.post("/api/recipes/generate", json={"description": ""}).status_code == 400
    assert c.post("/api/recipes/generate", json={"description": "x", "cookingTime": -5}).status_code == 400


def test_suggest_fallback():
    ideas = _client(GeminiUnavailable("down")).get("/api/recipes/suggest", params={"query": "pasta"}).json()
    assert [i["id"] for i in ideas] == [101, 102, 103]


def test_chat_fallback_and_validation():
    c = _client()
    r = c.post("/api/recipes/chat", json={"message": "I want a chicken dinner"})
    assert r.status_code == 200
    assert r.json() == {"response": CHAT_CHICKEN, "recipes": []}
    assert c.post("/api/recipes/chat", json={}).status_code == 400


def test_chat_with_gemini_reply_lists_related():
    r = _client("Grill it with lemon.").post("/api/recipes/chat", json={"message": "salmon"})
    assert r.json()["response"] == "Grill it with lemon."
    assert r.json()["recipes"] == [{"id": 2, "title": "Baked Salmon with Asparagus"}]


# ── meal planner ─────────────────────────────────────────────────────
def test_generate_day_from_gemini():
    r = _client(json.dumps(DAY_JSON)).post("/api/meal-planner/generate-day", json={"day": "Monday"})
    assert r.status_code == 200
    body = r.json()
    assert body["breakfast"] == {"id": 2000, "title": "Overnight Oats", "description": "Oats soaked in milk with berries."}


def test_generate_day_fallback_never_500():
    r = _client().post("/api/meal-planner/generate-day", json={"day": "tuesday"})
    assert r.status_code == 200
    assert r.json()["dinner"]["id"] == FALLBACK_DAY_MEALS["dinner"].id


def test_generate_day_unknown_day_400():
    assert _client().post("/api/meal-planner/generate-day", json={"day": "funday"}).status_code == 400


def test_generate_week_all_or_nothing():
    ok = _client(*[json.dumps(DAY_JSON)] * 7).post("/api/meal-planner/generate-week")
    assert ok.status_code == 200
    assert set(ok.json()) == {"monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"}

    replies = [json.dumps(DAY_JSON)] * 3 + ["garbage"] + [json.dumps(DAY_JSON)] * 3
    failed = _client(*replies).post("/api/meal-planner/generate-week")
    assert failed.status_code == 502
    assert "thursday" in failed.json()["detail"]


def test_serve_runs_app_under_uvicorn(monkeypatch):
    import main

    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))
    main.serve()
    (args, kwargs), = calls
    assert args == ("main:app",)
    assert kwargs["port"] == main.settings.port
