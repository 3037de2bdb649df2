"""Entry point for the foodorder Textual app."""

from __future__ import annotations

import argparse
import logging

from textual.app import App, ComposeResult
from textual.widgets import Header, Static

from foodorder.api import FoodApi
from foodorder.config import API_BASE_URL
from foodorder.food_details import FoodDetailsScreen
from foodorder.logs import configure_logging
from foodorder.models import Order

logger = logging.getLogger(__name__)


class FoodOrderApp(App):
    """Opens the detail screen for one food and reports the placed order."""

    TITLE = "Food Order"

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        ("q", "quit", "Quit"),
    ]

    def __init__(self, food_id: int, api: FoodApi) -> None:
        super().__init__()
        self.food_id = food_id
        self.api = api
        self.placed_order: Order | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="orders-summary")

    def on_mount(self) -> None:
        self.push_screen(FoodDetailsScreen(self.food_id, self.api), callback=self._on_details_closed)

    def _on_details_closed(self, order: Order | None) -> None:
        summary = self.query_one("#orders-summary", Static)
        if order is None:
            summary.update("No order placed. Press q to quit.")
            return
        self.placed_order = order
        summary.update(f"Order #{order.display_number} placed: {order.quantity}x {order.name}. Press q to quit.")

    async def on_unmount(self) -> None:
        await self.api.aclose()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="foodorder", description="Order a food item from the catalog.")
    parser.add_argument("food_id", type=int, help="catalog id of the food to open")
    parser.add_argument("--api-url", default=API_BASE_URL, help=f"backend base URL (default: {API_BASE_URL})")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging()
    logger.info("app_start food_id=%d api=%s", args.food_id, args.api_url)
    FoodOrderApp(args.food_id, FoodApi(base_url=args.api_url)).run()


if __name__ == "__main__":
    main()
