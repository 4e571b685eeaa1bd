"""In-progress order configuration for a single food."""
from decimal import Decimal
from typing import List

from food_details.services.ordering.models import Extra, Food, OrderPayload
from food_details.services.ordering.pricing import compute_total, format_total
from food_details.services.ordering.quantity import QuantityController


class OrderDraft:
    """
    A food plus the quantities chosen for it and its extras.

    The food (and its extras catalog) is immutable; quantities live in a
    QuantityController keyed by extra id. The total is derived on every read
    and is never stored.
    """

    def __init__(self, food: Food):
        self.food = food
        self.quantities = QuantityController(extra.id for extra in food.extras)

    @property
    def base_quantity(self) -> int:
        return self.quantities.base_quantity

    @property
    def extras(self) -> List[Extra]:
        """Extras joined with their quantities, in catalog order."""
        return [
            Extra(
                id=definition.id,
                name=definition.name,
                value=definition.value,
                quantity=self.quantities.extra_quantity(definition.id),
            )
            for definition in self.food.extras
        ]

    @property
    def total(self) -> Decimal:
        return compute_total(self.base_quantity, self.food.price, self.extras)

    @property
    def formatted_total(self) -> str:
        return format_total(self.total)

    def increment_base(self) -> bool:
        return self.quantities.increment_base()

    def decrement_base(self) -> bool:
        return self.quantities.decrement_base()

    def increment_extra(self, extra_id: int) -> bool:
        return self.quantities.increment_extra(extra_id)

    def decrement_extra(self, extra_id: int) -> bool:
        return self.quantities.decrement_extra(extra_id)

    def to_payload(self) -> OrderPayload:
        """Snapshot the draft as an order payload. Zero-quantity extras are kept."""
        return OrderPayload(
            product_id=self.food.id,
            name=self.food.name,
            description=self.food.description,
            price=self.total,
            category=self.food.category,
            thumbnail_url=self.food.image_url,
            extras=self.extras,
        )
