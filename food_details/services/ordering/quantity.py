"""Quantity controls for the base food and its extras."""
import logging
from typing import Dict, Iterable

logger = logging.getLogger(__name__)

BASE_QUANTITY_FLOOR = 1
EXTRA_QUANTITY_FLOOR = 0


class QuantityController:
    """
    Bounded counters for one food and its extras.

    The base quantity never drops below 1 and extra quantities never drop
    below 0. Neither has an upper bound. Every method touches exactly one
    counter and returns whether it changed.
    """

    def __init__(self, extra_ids: Iterable[int]):
        self._base_quantity = BASE_QUANTITY_FLOOR
        self._extra_quantities: Dict[int, int] = {
            extra_id: EXTRA_QUANTITY_FLOOR for extra_id in extra_ids
        }

    @property
    def base_quantity(self) -> int:
        return self._base_quantity

    def extra_quantity(self, extra_id: int) -> int:
        """Get the selected quantity for an extra (0 for unknown ids)."""
        return self._extra_quantities.get(extra_id, EXTRA_QUANTITY_FLOOR)

    def has_extra(self, extra_id: int) -> bool:
        return extra_id in self._extra_quantities

    def increment_base(self) -> bool:
        self._base_quantity += 1
        return True

    def decrement_base(self) -> bool:
        if self._base_quantity <= BASE_QUANTITY_FLOOR:
            return False
        self._base_quantity -= 1
        return True

    def increment_extra(self, extra_id: int) -> bool:
        if not self.has_extra(extra_id):
            logger.debug(f"[QUANTITY] Ignoring increment for unknown extra {extra_id}")
            return False
        self._extra_quantities[extra_id] += 1
        return True

    def decrement_extra(self, extra_id: int) -> bool:
        if not self.has_extra(extra_id):
            logger.debug(f"[QUANTITY] Ignoring decrement for unknown extra {extra_id}")
            return False
        if self._extra_quantities[extra_id] <= EXTRA_QUANTITY_FLOOR:
            return False
        self._extra_quantities[extra_id] -= 1
        return True
