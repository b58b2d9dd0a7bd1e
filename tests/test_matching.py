"""
Matching engine: search / similar / related_for_chat over an in-memory store.
"""
import asyncio

from core.matching import RecipeMatcher
from services.store import InMemoryRecipeStore
from fakes import make_recipe

# --- catalogue ----------------------------------------------------------
CATALOGUE = [
    make_recipe("Chicken Tikka", ["Indian", "Spicy", "Dinner"], ingredients=["chicken thighs", "yogurt"]),  # 1
    make_recipe("Paneer Curry", ["Indian", "Vegetarian", "Dinner"], ingredients=["paneer", "tomato"]),      # 2
    make_recipe("Garden Salad", ["Vegetarian", "Healthy"], description="Crisp greens."),                     # 3
    make_recipe("Lemon Tart", ["Dessert", "Baking"], ingredients=["lemons", "butter"]),                     # 4
    make_recipe("Tofu Bowl", ["vegetarian", "HEALTHY", "Asian"]),                                           # 5
]


def _matcher() -> RecipeMatcher:
    return RecipeMatcher(InMemoryRecipeStore(seed=CATALOGUE))


def run(coro):
    return asyncio.run(coro)


# ── search ───────────────────────────────────────────────────────────
def test_empty_query_and_filters_returns_everything():
    hits = run(_matcher().search("", []))
    assert [r.id for r in hits] == [1, 2, 3, 4, 5]


def test_query_matches_title_description_and_ingredients():
    m = _matcher()
    assert [r.title for r in run(m.search("TIKKA"))] == ["Chicken Tikka"]
    assert [r.title for r in run(m.search("crisp"))] == ["Garden Salad"]
    assert [r.title for r in run(m.search("yogurt"))] == ["Chicken Tikka"]


def test_filters_are_conjunctive_and_case_insensitive():
    hits = run(_matcher().search("", ["vegetarian", "healthy"]))
    assert [r.title for r in hits] == ["Garden Salad", "Tofu Bowl"]


def test_filters_only_narrow():
    m = _matcher()
    for q in ("", "a", "curry", "zzz"):
        broad = {r.id for r in run(m.search(q, []))}
        narrow = {r.id for r in run(m.search(q, ["Dinner"]))}
        assert narrow <= broad


def test_filter_must_match_whole_tag():
    assert run(_matcher().search("", ["Veg"])) == []


# ── similar ──────────────────────────────────────────────────────────
def test_similar_ranks_by_shared_tags_then_id():
    sims = run(_matcher().similar(2, limit=3))
    # Chicken Tikka shares 2, Garden Salad and Tofu Bowl share 1 each
    assert [r.id for r in sims] == [1, 3, 5]


def test_similar_excludes_target_and_respects_limit():
    m = _matcher()
    for rid in range(1, 6):
        for limit in (0, 1, 2, 10):
            sims = run(m.similar(rid, limit))
            assert rid not in [r.id for r in sims]
            assert len(sims) <= limit


def test_similar_with_no_shared_tags_still_excludes_itself():
    sims = run(_matcher().similar(4, limit=2))
    assert [r.id for r in sims] == [1, 2]


def test_similar_unknown_id_is_empty():
    assert run(_matcher().similar(999)) == []


# ── related_for_chat ─────────────────────────────────────────────────
def test_related_for_chat_returns_refs():
    refs = run(_matcher().related_for_chat("Paneer"))
    assert [(r.id, r.title) for r in refs] == [(2, "Paneer Curry")]


def test_related_for_chat_limit():
    refs = run(_matcher().related_for_chat("a", limit=2))
    assert len(refs) == 2


def test_related_for_chat_sentence_rarely_matches():
    # whole-message substring match, as for search()
    assert run(_matcher().related_for_chat("I want a chicken dinner")) == []
