"""Error types raised by the order-configuration engine."""


class FoodDetailsError(Exception):
    """Base class for all food details errors."""


class NotFoundError(FoodDetailsError):
    """The backend has no food for the requested id."""

    def __init__(self, food_id: int):
        self.food_id = food_id
        super().__init__(f"Food {food_id} not found")


class BackendUnavailableError(FoodDetailsError):
    """A backend call failed at the transport or server level."""


class SubmissionError(FoodDetailsError):
    """POST /orders failed. The draft is untouched and may be submitted again."""
