"""Food loading for a details screen."""
import logging
from typing import NamedTuple

from pydantic import ValidationError

from food_details.core.errors import BackendUnavailableError, NotFoundError
from food_details.services.backend.base import BackendClient
from food_details.services.favorites.state import FavoriteStatus
from food_details.services.ordering.draft import OrderDraft
from food_details.services.ordering.models import Food

logger = logging.getLogger(__name__)


class LoadedFood(NamedTuple):
    """Result of loading a food: a fresh draft and its favorite status."""

    draft: OrderDraft
    favorite: FavoriteStatus


class MenuItemLoader:
    """Loads a food and its initial favorite status from the backend."""

    def __init__(self, backend: BackendClient):
        self.backend = backend

    async def load(self, food_id: int) -> LoadedFood:
        """
        Load a food and build a draft for it.

        Raises:
            NotFoundError: the backend has no food for ``food_id``
            BackendUnavailableError: a backend read failed or returned junk
        """
        logger.info(f"[LOADER] Loading food {food_id}")
        raw_food = await self.backend.get_food(food_id)
        if not raw_food:
            logger.warning(f"[LOADER] Food {food_id} not found")
            raise NotFoundError(food_id)

        try:
            food = Food.model_validate(raw_food)
        except ValidationError as e:
            logger.error(f"[LOADER] Invalid food payload for {food_id}: {str(e)}")
            raise BackendUnavailableError(f"Invalid food payload for {food_id}") from e

        # Extra quantities always start at zero, whatever the server sent
        draft = OrderDraft(food)

        favorites = await self.backend.list_favorites()
        is_favorite = any(favorite.get("id") == food.id for favorite in favorites)
        status = FavoriteStatus.from_bool(is_favorite)

        logger.info(
            f"[LOADER] Food {food_id} loaded - {len(food.extras)} extras, favorite: {is_favorite}"
        )
        return LoadedFood(draft=draft, favorite=status)
