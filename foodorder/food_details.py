"""Food detail screen: extras, quantities, favorite toggle and order submit."""

from __future__ import annotations

import logging

import httpx
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Footer, Static
from textual.worker import Worker

from foodorder.api import FoodApi
from foodorder.composer import OrderComposer
from foodorder.errors import ApiError, log_error_sink
from foodorder.favorites import FavoriteToggle
from foodorder.formatting import PriceFormatter, format_value
from foodorder.models import Order
from foodorder.rendering import favorite_icon, format_extra_lines, format_item_header, format_total_line
from foodorder.submitter import OrderSubmitter

logger = logging.getLogger(__name__)


class FoodDetailsScreen(Screen[Order | None]):
    """Detail view for one food item. Dismisses with the placed order."""

    CSS = """
    FoodDetailsScreen {
        layout: vertical;
    }

    #food-header-row {
        height: auto;
        border: round $primary;
        padding: 0 1;
    }

    #food-header {
        width: 1fr;
    }

    #favorite-icon {
        width: 3;
    }

    #extras-pane {
        height: 1fr;
        border: round $secondary;
        padding: 0 1;
    }

    #total-pane {
        height: auto;
        border: round $secondary;
        padding: 0 1;
    }

    #status-line {
        height: 1;
        color: #dddddd;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        ("up", "move_cursor(-1)", "Previous extra"),
        ("down", "move_cursor(1)", "Next extra"),
        ("k", "move_cursor(-1)", "Previous extra"),
        ("j", "move_cursor(1)", "Next extra"),
        ("right", "change_extra(1)", "Extra +"),
        ("left", "change_extra(-1)", "Extra -"),
        ("plus,right_square_bracket", "change_base(1)", "Quantity +"),
        ("minus,left_square_bracket", "change_base(-1)", "Quantity -"),
        ("f", "toggle_favorite", "Favorite"),
        ("enter", "submit_order", "Confirm order"),
    ]

    cursor_index = reactive(0)

    def __init__(self, food_id: int, api: FoodApi, formatter: PriceFormatter = format_value) -> None:
        super().__init__()
        self.food_id = food_id
        self.api = api
        self.formatter = formatter
        self.composer = OrderComposer(formatter=formatter)
        self.favorites = FavoriteToggle(api, on_error=self._report_error)
        self.submitter = OrderSubmitter(api, on_success=self._order_placed, on_error=self._report_error)
        self.system_status = ""
        self._submit_worker: Worker[Order | None] | None = None

    def compose(self) -> ComposeResult:
        with Horizontal(id="food-header-row"):
            yield Static(id="food-header")
            yield Static(id="favorite-icon")
        with Vertical(id="extras-pane"):
            yield Static("Extras", classes="pane-title")
            yield Static(id="extras-list")
        with Vertical(id="total-pane"):
            yield Static("Order total", classes="pane-title")
            yield Static(id="total-line")
        yield Static(id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        self.system_status = "Loading…"
        self._refresh_all()
        # Screen workers are cancelled when the screen goes away.
        self.run_worker(self._load_food(), group="load", exclusive=True)

    async def _load_food(self) -> None:
        try:
            item = await self.api.get_food(self.food_id)
        except (ApiError, httpx.HTTPError, KeyError, TypeError, ValueError) as exc:
            self._report_error("load_food", exc)
            return
        self.composer.initialize(item)
        logger.debug("food_loaded id=%r extras=%d", item.id, len(item.extras))
        self.cursor_index = 0
        self.system_status = ""
        self._refresh_all()

    def action_move_cursor(self, delta: int) -> None:
        lines = self.composer.extra_lines
        if not lines:
            return
        self.cursor_index = (self.cursor_index + delta) % len(lines)
        self._refresh_extras()

    def action_change_extra(self, delta: int) -> None:
        lines = self.composer.extra_lines
        if not lines:
            return
        extra_id = lines[self.cursor_index].id
        if delta > 0:
            self.composer.increment_extra(extra_id)
        else:
            self.composer.decrement_extra(extra_id)
        self._refresh_extras()
        self._refresh_total()

    def action_change_base(self, delta: int) -> None:
        if delta > 0:
            self.composer.increment_base()
        else:
            self.composer.decrement_base()
        self._refresh_total()

    def action_toggle_favorite(self) -> None:
        if not self.composer.item.is_loaded:
            return
        change = self.favorites.toggle(self.composer.item)
        self._refresh_header()
        self.run_worker(self.favorites.sync(change), group="favorites")

    def action_submit_order(self) -> None:
        if not self.composer.item.is_loaded:
            return
        pending = self._submit_worker is not None and not self._submit_worker.is_finished
        if pending or self.submitter.in_flight:
            self.system_status = "Order is being sent…"
            self._refresh_status()
            return
        self.system_status = "Sending order…"
        self._refresh_status()
        self._submit_worker = self.run_worker(self.submitter.submit(self.composer.snapshot()), group="submit")

    def _order_placed(self, order: Order) -> None:
        self.system_status = f"Order #{order.display_number} placed"
        self._refresh_status()
        self.app.call_later(self.dismiss, order)

    def _report_error(self, operation: str, error: Exception) -> None:
        log_error_sink(operation, error)
        self.system_status = f"{operation.replace('_', ' ')} failed: {error}"
        self._refresh_status()

    def _refresh_all(self) -> None:
        self._refresh_header()
        self._refresh_extras()
        self._refresh_total()
        self._refresh_status()

    def _refresh_header(self) -> None:
        try:
            header = self.query_one("#food-header", Static)
            icon = self.query_one("#favorite-icon", Static)
        except NoMatches:
            return
        header.update(format_item_header(self.composer.item, self.formatter))
        icon.update(favorite_icon(self.favorites.state))

    def _refresh_extras(self) -> None:
        try:
            extras = self.query_one("#extras-list", Static)
        except NoMatches:
            return
        extras.update(format_extra_lines(self.composer.extra_lines, self.cursor_index))

    def _refresh_total(self) -> None:
        try:
            total = self.query_one("#total-line", Static)
        except NoMatches:
            return
        total.update(format_total_line(self.composer.compute_total(), self.composer.base_quantity))

    def _refresh_status(self) -> None:
        try:
            status = self.query_one("#status-line", Static)
        except NoMatches:
            return
        status.update(self.system_status)
