"""Currency formatting for display strings."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Callable

from foodorder.config import CURRENCY_SYMBOL, DECIMAL_SEPARATOR, THOUSANDS_SEPARATOR

PriceFormatter = Callable[[Decimal], str]

_CENTS = Decimal("0.01")


def format_value(amount: Decimal | int | float) -> str:
    """Render an amount as currency, e.g. ``R$ 1.234,50``."""
    value = Decimal(str(amount)).quantize(_CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    whole, cents = f"{abs(value):.2f}".split(".")
    grouped = f"{int(whole):,}".replace(",", THOUSANDS_SEPARATOR)
    return f"{sign}{CURRENCY_SYMBOL} {grouped}{DECIMAL_SEPARATOR}{cents}"
