"""
services/plan_store.py
────────────────────────────────────────────────────────────────────────
Local key-value file holding the user's week plan.

The file is a flat JSON object (`{"mealPlan": {...}}`) that mirrors the
browser's localStorage layout: one fixed key, value replaced wholesale on
every save, no merging.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from core.models import WeekPlan

_LOG = logging.getLogger(__name__)

PLAN_KEY = "mealPlan"


class WeekPlanStore:
    def __init__(self, path: str | Path, key: str = PLAN_KEY) -> None:
        self.path = Path(path)
        self.key = key

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} must contain a JSON object")
        return data

    def _write_all(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
        os.replace(tmp, self.path)

    def load(self) -> WeekPlan | None:
        raw = self._read_all().get(self.key)
        return WeekPlan.model_validate(raw) if raw is not None else None

    def save(self, plan: WeekPlan) -> None:
        data = self._read_all()
        data[self.key] = plan.model_dump(mode="json", by_alias=True)
        self._write_all(data)
        _LOG.info("saved week plan to %s[%s]", self.path, self.key)

    def clear(self) -> None:
        data = self._read_all()
        if data.pop(self.key, None) is not None:
            self._write_all(data)
