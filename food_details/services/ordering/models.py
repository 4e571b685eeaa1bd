"""Food, extra and order models."""
from decimal import Decimal
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator


class ExtraDefinition(BaseModel):
    """Catalog record for an extra. Quantities live in the draft, not here."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    value: Decimal


class Food(BaseModel):
    """A menu item as served by GET /foods/{id}."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str = ""
    price: Decimal
    category: int
    image_url: str = ""
    extras: Tuple[ExtraDefinition, ...] = ()

    @field_validator("extras")
    @classmethod
    def extra_ids_unique(
        cls, extras: Tuple[ExtraDefinition, ...]
    ) -> Tuple[ExtraDefinition, ...]:
        """Reject catalogs that repeat an extra id."""
        seen = set()
        for extra in extras:
            if extra.id in seen:
                raise ValueError(f"duplicate extra id {extra.id}")
            seen.add(extra.id)
        return extras


class Extra(BaseModel):
    """An extra joined with its selected quantity."""

    id: int
    name: str
    value: Decimal
    quantity: int = 0

    @field_serializer("value")
    def serialize_value(self, value: Decimal) -> float:
        return float(value)


class FavoriteFood(BaseModel):
    """Body of POST /favorites: food metadata without extras."""

    id: int
    name: str
    description: str = ""
    price: Decimal
    category: int
    image_url: str = ""

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)

    @classmethod
    def from_food(cls, food: Food) -> "FavoriteFood":
        """Build a fresh snapshot of a food, leaving extras behind."""
        return cls(
            id=food.id,
            name=food.name,
            description=food.description,
            price=food.price,
            category=food.category,
            image_url=food.image_url,
        )


class OrderPayload(BaseModel):
    """Body of POST /orders."""

    product_id: int
    name: str
    description: str
    price: Decimal
    category: int
    thumbnail_url: str
    extras: List[Extra]

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)
