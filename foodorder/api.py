"""HTTP client for the food catalog, favorites and order stores."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from foodorder.config import API_BASE_URL, API_TIMEOUT_SECONDS
from foodorder.errors import ApiError
from foodorder.models import Item, Order

logger = logging.getLogger(__name__)


class FoodApi:
    """Thin async wrapper over the backend REST endpoints.

    Endpoints:
    - ``GET /foods/{id}``       item with its extras
    - ``POST /favorites``       add an item (item-shaped body)
    - ``DELETE /favorites/{id}``
    - ``GET /orders``           existing orders
    - ``POST /orders``          new order, identifier assigned by the store
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = API_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> FoodApi:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def get_food(self, food_id: int) -> Item:
        """Fetch one food with its extras."""
        data = await self._request("GET", f"/foods/{food_id}", expect=dict)
        return Item.from_payload(data)

    async def add_favorite(self, item: Item) -> None:
        """Add ``item`` to the favorites store."""
        await self._request("POST", "/favorites", json=item.to_payload())

    async def remove_favorite(self, item_id: int) -> None:
        """Remove an item from the favorites store."""
        await self._request("DELETE", f"/favorites/{item_id}")

    async def list_orders(self) -> list[dict[str, Any]]:
        """Existing orders, used only to derive a display number."""
        return await self._request("GET", "/orders", expect=list)

    async def create_order(self, order: Order) -> dict[str, Any]:
        """Send ``order`` and return the record created by the store."""
        return await self._request("POST", "/orders", json=order.to_payload(), expect=dict)

    async def _request(self, method: str, path: str, json: Any = None, expect: type | None = None) -> Any:
        """Send a request; decode the body only when a shape is expected."""
        response = await self._client.request(method, path, json=json)
        logger.debug("api %s %s -> %s", method, path, response.status_code)
        url = str(response.request.url)
        if not 200 <= response.status_code < 300:
            raise ApiError(response.status_code, response.text, url=url)
        if expect is None:
            return None
        try:
            data = response.json()
        except ValueError as exc:
            raise ApiError(response.status_code, f"undecodable body: {response.text}", url=url) from exc
        if not isinstance(data, expect):
            raise ApiError(
                response.status_code,
                f"expected a JSON {expect.__name__}, got {type(data).__name__}",
                url=url,
            )
        return data
