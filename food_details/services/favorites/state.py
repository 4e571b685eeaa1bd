"""Favorite status for a single food."""
import asyncio
import logging
from enum import Enum
from functools import partial
from typing import Awaitable, Callable, Optional

from food_details.services.backend.base import BackendClient
from food_details.services.ordering.models import FavoriteFood, Food

logger = logging.getLogger(__name__)


class FavoriteStatus(str, Enum):
    """Whether a food is in the favorites collection."""

    NOT_FAVORITE = "not_favorite"
    FAVORITE = "favorite"

    @classmethod
    def from_bool(cls, is_favorite: bool) -> "FavoriteStatus":
        return cls.FAVORITE if is_favorite else cls.NOT_FAVORITE

    def __str__(self) -> str:
        """Return the string value of the status."""
        return self.value


class FavoriteStatusMachine:
    """
    Optimistic favorite toggle for one food.

    ``toggle`` flips the local status immediately and schedules the matching
    backend write without waiting for it. Writes run one after another in
    toggle order. A failed write never rolls the status back; it only sets
    ``needs_reconciliation`` so that ``reconcile`` can later adopt whatever
    the backend holds.
    """

    def __init__(
        self,
        food: Food,
        backend: BackendClient,
        status: FavoriteStatus = FavoriteStatus.NOT_FAVORITE,
    ):
        self.food = food
        self.backend = backend
        self.status = status
        self.needs_reconciliation = False
        self._last_write: Optional[asyncio.Task] = None

    @property
    def is_favorite(self) -> bool:
        return self.status is FavoriteStatus.FAVORITE

    def toggle(self) -> FavoriteStatus:
        """
        Flip the status and schedule the backend write.

        Raises RuntimeError without touching the status when no event loop
        is running.
        """
        loop = asyncio.get_running_loop()
        if self.is_favorite:
            status = FavoriteStatus.NOT_FAVORITE
            write = partial(self.backend.remove_favorite, self.food.id)
            operation = "remove"
        else:
            status = FavoriteStatus.FAVORITE
            write = partial(self.backend.add_favorite, FavoriteFood.from_food(self.food))
            operation = "add"

        self._last_write = loop.create_task(
            self._run_write(self._last_write, operation, write)
        )
        self.status = status
        logger.info(f"[FAVORITE] Food {self.food.id} is now {self.status}")
        return self.status

    async def _run_write(
        self,
        previous: Optional[asyncio.Task],
        operation: str,
        write: Callable[[], Awaitable[None]],
    ) -> None:
        if previous is not None:
            try:
                await previous
            except Exception as e:
                logger.error(
                    f"[FAVORITE] Previous write for food {self.food.id} crashed - "
                    f"{type(e).__name__}: {str(e)}"
                )
        try:
            await write()
            logger.debug(f"[FAVORITE] {operation} write for food {self.food.id} done")
        except Exception as e:
            self.needs_reconciliation = True
            logger.warning(
                f"[FAVORITE] {operation} write for food {self.food.id} failed, "
                f"local status kept as {self.status} - {type(e).__name__}: {str(e)}"
            )

    async def drain(self) -> None:
        """Wait for every scheduled write to finish."""
        if self._last_write is not None:
            await self._last_write

    async def reconcile(self) -> FavoriteStatus:
        """Adopt the backend's answer for this food and clear the reconciliation flag."""
        await self.drain()
        favorites = await self.backend.list_favorites()
        is_favorite = any(favorite.get("id") == self.food.id for favorite in favorites)
        status = FavoriteStatus.from_bool(is_favorite)
        if status is not self.status:
            logger.info(f"[FAVORITE] Food {self.food.id} reconciled from {self.status} to {status}")
        self.status = status
        self.needs_reconciliation = False
        return self.status
