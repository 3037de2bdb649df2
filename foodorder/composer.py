"""Order composition state: extras, base quantity and the running total."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from foodorder.formatting import PriceFormatter, format_value
from foodorder.models import ExtraLine, ExtraOption, Item

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompositionSnapshot:
    """Immutable view of a composer at one point in time."""

    item: Item
    extra_lines: tuple[ExtraLine, ...]
    base_quantity: int

    def subtotal(self) -> Decimal:
        """Extras plus base item price times quantity."""
        extras_total = sum((line.line_total for line in self.extra_lines), Decimal("0"))
        return extras_total + self.item.price * self.base_quantity


class OrderComposer:
    """Tracks per-extra quantities and the base item quantity for one screen.

    Extras have a floor of 0 and the base item a floor of 1; neither has a
    ceiling. Every mutation replaces the line tuple instead of editing it, so
    snapshots handed out earlier never change underneath their holders.
    """

    def __init__(self, formatter: PriceFormatter = format_value) -> None:
        self.formatter = formatter
        self.item = Item.unloaded()
        self.extra_lines: tuple[ExtraLine, ...] = ()
        self.base_quantity = 1
        self._total_key: tuple[tuple[ExtraLine, ...], Item, int] | None = None
        self._total_value = ""

    def initialize(self, item: Item, extra_options: Iterable[ExtraOption] | None = None) -> CompositionSnapshot:
        """Replace all state with a fresh composition for ``item``."""
        options = item.extras if extra_options is None else tuple(extra_options)
        self.item = item
        self.extra_lines = tuple(ExtraLine.from_option(option) for option in options)
        self.base_quantity = 1
        logger.debug("composer_initialized item=%r extras=%d", item.id, len(self.extra_lines))
        return self.snapshot()

    def increment_extra(self, extra_id: int) -> CompositionSnapshot:
        """Add one unit of an extra; unknown ids are ignored."""
        return self._change_extra(extra_id, 1)

    def decrement_extra(self, extra_id: int) -> CompositionSnapshot:
        """Remove one unit of an extra, stopping at 0."""
        return self._change_extra(extra_id, -1)

    def increment_base(self) -> CompositionSnapshot:
        """Add one unit of the item itself."""
        self.base_quantity += 1
        return self.snapshot()

    def decrement_base(self) -> CompositionSnapshot:
        """Remove one unit of the item, stopping at 1."""
        self.base_quantity = max(self.base_quantity - 1, 1)
        return self.snapshot()

    def extra_quantity(self, extra_id: int) -> int | None:
        """Current quantity of an extra, or None if the id is unknown."""
        for line in self.extra_lines:
            if line.id == extra_id:
                return line.quantity
        return None

    def subtotal(self) -> Decimal:
        """Unformatted total of the current composition."""
        return self.snapshot().subtotal()

    def compute_total(self) -> str:
        """Formatted total, recomputed whenever any operand changes."""
        key = (self.extra_lines, self.item, self.base_quantity)
        if key != self._total_key:
            self._total_value = self.formatter(self.subtotal())
            self._total_key = key
        return self._total_value

    def snapshot(self) -> CompositionSnapshot:
        """Immutable view of the current state."""
        return CompositionSnapshot(item=self.item, extra_lines=self.extra_lines, base_quantity=self.base_quantity)

    def _change_extra(self, extra_id: int, delta: int) -> CompositionSnapshot:
        if self.extra_quantity(extra_id) is None:
            logger.debug("extra_not_found id=%r", extra_id)
            return self.snapshot()

        self.extra_lines = tuple(
            line.with_quantity(max(line.quantity + delta, 0)) if line.id == extra_id else line
            for line in self.extra_lines
        )
        return self.snapshot()
