"""Rendering helpers for the food detail screen."""

from __future__ import annotations

from rich.text import Text

from foodorder.formatting import PriceFormatter, format_value
from foodorder.models import ExtraLine, FavoriteState, Item

FAVORITE_ICON = "♥"
NOT_FAVORITE_ICON = "♡"


def favorite_icon(state: FavoriteState) -> Text:
    """Heart icon for the header: filled when favorite."""
    if state is FavoriteState.FAVORITE:
        return Text(FAVORITE_ICON, style="bold #ffb84d")
    return Text(NOT_FAVORITE_ICON, style="#ffb84d")


def format_item_header(item: Item, formatter: PriceFormatter = format_value) -> Text:
    """Render name, description and unit price of an item."""
    if not item.is_loaded:
        return Text("Loading…", style="dim")

    text = Text()
    text.append(item.name, style="bold")
    if item.description:
        text.append(f"\n{item.description}", style="white")
    price = item.formatted_price or formatter(item.price)
    text.append(f"\n{price}", style="bold #39b100")
    return text


def format_extra_lines(lines: tuple[ExtraLine, ...], selected_index: int | None) -> Text:
    """Render the extras list with a cursor and per-line quantity."""
    if not lines:
        return Text("(no extras)", style="dim")

    width = max(len(line.name) for line in lines)
    text = Text()
    for idx, line in enumerate(lines):
        if idx > 0:
            text.append("\n")
        pointer = "➤ " if idx == selected_index else "  "
        text.append(pointer)
        text.append(line.name.ljust(width))
        style = "bold white" if line.quantity else "dim"
        text.append(f"   - {line.quantity} +", style=style)
    return text


def format_total_line(total: str, base_quantity: int) -> Text:
    """Render the formatted total next to the base quantity stepper."""
    text = Text()
    text.append(total, style="bold #39b100")
    text.append(f"   [ - {base_quantity} + ]")
    return text
