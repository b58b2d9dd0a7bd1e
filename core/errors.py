class AlreadySavedError(Exception):
    def __init__(self, user_id: int, recipe_id: int) -> None:
        super().__init__(f"recipe {recipe_id} already saved by user {user_id}")
        self.user_id = user_id
        self.recipe_id = recipe_id


class PlanGenerationError(RuntimeError):
    """A strict day-plan call failed; the whole week is abandoned."""

    def __init__(self, day: str, reason: str) -> None:
        super().__init__(f"meal plan generation failed on {day}: {reason}")
        self.day = day
        self.reason = reason
