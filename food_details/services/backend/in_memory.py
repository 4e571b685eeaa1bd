"""In-memory backend."""
import copy
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from food_details.core.errors import BackendUnavailableError
from food_details.services.backend.base import BackendClient
from food_details.services.ordering.models import FavoriteFood, OrderPayload

logger = logging.getLogger(__name__)


class InMemoryBackend(BackendClient):
    """
    Backend kept in memory, seeded from a YAML file or a dict.

    Every write is recorded in ``calls`` as ``(operation, argument)`` so
    callers can check what was sent and in which order. Setting
    ``fail_writes`` or ``fail_reads`` makes the matching operations raise
    BackendUnavailableError.
    """

    def __init__(
        self,
        seed_file: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
    ):
        if data is None:
            if seed_file is None:
                seed_file = Path(__file__).parent / "data" / "db.yaml"
            with open(seed_file, "r") as f:
                data = yaml.safe_load(f) or {}
        data = copy.deepcopy(data)
        self.foods: Dict[int, Dict[str, Any]] = {
            food["id"]: food for food in data.get("foods", [])
        }
        self.favorites: List[Dict[str, Any]] = list(data.get("favorites", []))
        self.orders: List[Dict[str, Any]] = list(data.get("orders", []))
        self.calls: List[Tuple[str, Any]] = []
        self.fail_reads = False
        self.fail_writes = False

    def _check(self, failing: bool, operation: str) -> None:
        if failing:
            logger.warning(f"[BACKEND] Simulated failure for {operation}")
            raise BackendUnavailableError(f"{operation} unavailable")

    async def get_food(self, food_id: int) -> Optional[Dict[str, Any]]:
        self._check(self.fail_reads, "get_food")
        food = self.foods.get(food_id)
        return copy.deepcopy(food) if food is not None else None

    async def list_favorites(self) -> List[Dict[str, Any]]:
        self._check(self.fail_reads, "list_favorites")
        return copy.deepcopy(self.favorites)

    async def add_favorite(self, favorite: FavoriteFood) -> None:
        self.calls.append(("add_favorite", favorite))
        self._check(self.fail_writes, "add_favorite")
        record = favorite.model_dump(mode="json")
        self.favorites = [f for f in self.favorites if f["id"] != favorite.id]
        self.favorites.append(record)

    async def remove_favorite(self, food_id: int) -> None:
        self.calls.append(("remove_favorite", food_id))
        self._check(self.fail_writes, "remove_favorite")
        self.favorites = [f for f in self.favorites if f["id"] != food_id]

    async def create_order(self, payload: OrderPayload) -> None:
        self.calls.append(("create_order", payload))
        self._check(self.fail_writes, "create_order")
        record = payload.model_dump(mode="json")
        record["id"] = len(self.orders) + 1
        self.orders.append(record)
