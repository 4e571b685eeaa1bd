"""Backend client interface."""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from food_details.services.ordering.models import FavoriteFood, OrderPayload


class BackendClient(ABC):
    """Abstract base class for the foods/favorites/orders backend."""

    @abstractmethod
    async def get_food(self, food_id: int) -> Optional[Dict[str, Any]]:
        """GET /foods/{id}. Returns None when the food does not exist."""
        pass

    @abstractmethod
    async def list_favorites(self) -> List[Dict[str, Any]]:
        """GET /favorites."""
        pass

    @abstractmethod
    async def add_favorite(self, favorite: FavoriteFood) -> None:
        """POST /favorites."""
        pass

    @abstractmethod
    async def remove_favorite(self, food_id: int) -> None:
        """DELETE /favorites/{id}."""
        pass

    @abstractmethod
    async def create_order(self, payload: OrderPayload) -> None:
        """POST /orders."""
        pass
