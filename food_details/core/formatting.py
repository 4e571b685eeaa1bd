"""Currency formatting."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from food_details.core.config import settings

CENTS = Decimal("0.01")


def format_currency(amount: Union[Decimal, float, int]) -> str:
    """
    Format an amount for display, e.g. ``R$ 1.234,50``.

    Symbol and separators come from settings.
    """
    value = Decimal(str(amount)).quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    separators = str.maketrans(
        {",": settings.thousands_separator, ".": settings.decimal_separator}
    )
    number = f"{abs(value):,.2f}".translate(separators)
    return f"{sign}{settings.currency_symbol} {number}"
