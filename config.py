"""
Centralised settings loader.

Every field maps to the upper-case environment variable of the same name
(``gemini_api_key`` ⇄ ``GEMINI_API_KEY``) and may also come from ``.env``.
"""

from __future__ import annotations
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime / DB ───────────────────────────────────────────────
    env_name: str = "local"
    log_level: str = "INFO"
    # unset → in-memory store seeded with the sample recipes
    database_url: str | None = None
    seed_on_startup: bool = True
    host: str = "0.0.0.0"
    port: int = 8000

    # ─── Gemini ─────────────────────────────────────────────────────
    # missing key is not fatal: every AI path degrades to its fallback
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.0-flash"
    gemini_timeout_seconds: float = Field(20.0, gt=0)

    # ─── single-user context (no auth yet) ──────────────────────────
    default_user_id: int = 1

    # ─── local week-plan store ──────────────────────────────────────
    plan_store_path: str = "meal_plan.json"

    # allow other teammates’ env-vars without crashing
    model_config = SettingsConfigDict(
        extra="ignore", env_file=".env", env_file_encoding="utf-8"
    )


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
