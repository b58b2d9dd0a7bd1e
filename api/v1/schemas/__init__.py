"""Re-export individual schema modules for easy imports."""

from .recipe import SaveRecipeIn
from .chat import ChatIn
from .planner import DayPlanIn

__all__ = [
    "SaveRecipeIn",
    "ChatIn",
    "DayPlanIn",
]
