"""Order total calculation."""
from decimal import Decimal
from typing import Iterable, Union

from food_details.core.formatting import format_currency
from food_details.services.ordering.models import Extra

Number = Union[Decimal, int, float]


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def compute_total(
    base_quantity: int, unit_price: Number, extras: Iterable[Extra]
) -> Decimal:
    """
    Calculate the order total.

    total = base_quantity * unit_price + sum(extra.quantity * extra.value)
    """
    food_total = base_quantity * _to_decimal(unit_price)
    extras_total = sum(
        (extra.quantity * _to_decimal(extra.value) for extra in extras),
        Decimal("0"),
    )
    return food_total + extras_total


def format_total(amount: Number) -> str:
    """Format a total for display."""
    return format_currency(amount)
