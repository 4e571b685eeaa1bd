"""Food details screen: display data and user commands for one food."""
import logging
from typing import Callable, List, Optional

from pydantic import BaseModel

from food_details.core.formatting import format_currency
from food_details.services.backend.base import BackendClient
from food_details.services.favorites.state import FavoriteStatus, FavoriteStatusMachine
from food_details.services.menu.loader import MenuItemLoader
from food_details.services.ordering.draft import OrderDraft
from food_details.services.ordering.models import OrderPayload
from food_details.services.ordering.submission import OrderSubmissionFlow

logger = logging.getLogger(__name__)

FAVORITE_ICON = "favorite"
NOT_FAVORITE_ICON = "favorite-border"


class ExtraRow(BaseModel):
    """One extra as shown on screen."""

    id: int
    name: str
    quantity: int


class FoodDetailsView(BaseModel):
    """Everything the screen renders."""

    name: str
    description: str
    image_url: str
    formatted_price: str
    extras: List[ExtraRow] = []
    food_quantity: int
    formatted_total: str
    favorite_icon: str


class FoodDetailsScreen:
    """
    Owns one activation of the food details screen.

    Quantity and favorite commands are synchronous and visible to the next
    ``view()`` immediately. ``submit`` is the only command that awaits the
    backend; on success it calls ``on_submitted`` (usually "go back").
    """

    def __init__(
        self,
        draft: OrderDraft,
        favorite: FavoriteStatusMachine,
        submission: OrderSubmissionFlow,
        on_submitted: Optional[Callable[[OrderPayload], None]] = None,
    ):
        self.draft = draft
        self.favorite = favorite
        self.submission = submission
        self.on_submitted = on_submitted

    @classmethod
    async def open(
        cls,
        food_id: int,
        backend: BackendClient,
        on_submitted: Optional[Callable[[OrderPayload], None]] = None,
    ) -> "FoodDetailsScreen":
        """Load a food and build its screen. Load errors propagate."""
        loaded = await MenuItemLoader(backend).load(food_id)
        favorite = FavoriteStatusMachine(
            food=loaded.draft.food,
            backend=backend,
            status=loaded.favorite,
        )
        return cls(
            draft=loaded.draft,
            favorite=favorite,
            submission=OrderSubmissionFlow(backend),
            on_submitted=on_submitted,
        )

    def view(self) -> FoodDetailsView:
        """Build the current display data."""
        food = self.draft.food
        return FoodDetailsView(
            name=food.name,
            description=food.description,
            image_url=food.image_url,
            formatted_price=format_currency(food.price),
            extras=[
                ExtraRow(id=extra.id, name=extra.name, quantity=extra.quantity)
                for extra in self.draft.extras
            ],
            food_quantity=self.draft.base_quantity,
            formatted_total=self.draft.formatted_total,
            favorite_icon=self.favorite_icon,
        )

    @property
    def favorite_icon(self) -> str:
        return FAVORITE_ICON if self.favorite.is_favorite else NOT_FAVORITE_ICON

    def increment_base(self) -> None:
        self.draft.increment_base()

    def decrement_base(self) -> None:
        self.draft.decrement_base()

    def increment_extra(self, extra_id: int) -> None:
        self.draft.increment_extra(extra_id)

    def decrement_extra(self, extra_id: int) -> None:
        self.draft.decrement_extra(extra_id)

    def toggle_favorite(self) -> FavoriteStatus:
        return self.favorite.toggle()

    async def submit(self) -> OrderPayload:
        """Submit the order. SubmissionError leaves the screen as it was."""
        payload = await self.submission.submit(self.draft)
        if self.on_submitted is not None:
            self.on_submitted(payload)
        return payload
