from dataclasses import dataclass


@dataclass(frozen=True)
class UserContext:
    """Who a saved-recipe operation acts for. Stands in for real auth."""

    user_id: int
