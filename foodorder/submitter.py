"""Builds orders from a composition and sends them to the order store."""

from __future__ import annotations

import logging
from typing import Callable

import httpx

from foodorder.api import FoodApi
from foodorder.composer import CompositionSnapshot
from foodorder.errors import ApiError, ErrorSink, SubmissionInProgress, log_error_sink
from foodorder.models import Order

logger = logging.getLogger(__name__)


def build_order(snapshot: CompositionSnapshot, display_number: int | None = None) -> Order:
    """Create an order from a snapshot.

    All extra lines are kept, including the ones left at zero. The order has
    no identifier of its own; the store assigns one on creation.
    """
    item = snapshot.item
    return Order(
        product_id=item.id,
        name=item.name,
        description=item.description,
        price=item.price,
        image_url=item.image_url,
        extras=tuple(snapshot.extra_lines),
        quantity=snapshot.base_quantity,
        display_number=display_number,
    )


class OrderSubmitter:
    """Sends one order at a time.

    ``submit`` runs read-orders, build, send and ``on_success`` strictly in
    sequence. A second call while one is in flight is refused. Failures are
    reported to ``on_error`` and never retried.
    """

    def __init__(
        self,
        api: FoodApi,
        on_success: Callable[[Order], None] | None = None,
        on_error: ErrorSink = log_error_sink,
    ) -> None:
        self.api = api
        self.on_success = on_success
        self.on_error = on_error
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    async def submit(self, snapshot: CompositionSnapshot) -> Order | None:
        if self._in_flight:
            self.on_error("submit_order", SubmissionInProgress("An order is already being submitted"))
            return None

        self._in_flight = True
        try:
            existing = await self.api.list_orders()
            # Display only: concurrent clients can compute the same number.
            order = build_order(snapshot, display_number=len(existing) + 1)
            created = await self.api.create_order(order)
        except (ApiError, httpx.HTTPError) as exc:
            self.on_error("submit_order", exc)
            return None
        finally:
            self._in_flight = False

        logger.info(
            "order_submitted store_id=%r display_number=%s quantity=%d",
            created.get("id"),
            order.display_number,
            order.quantity,
        )
        if self.on_success is not None:
            self.on_success(order)
        return order
