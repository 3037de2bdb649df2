import json
from decimal import Decimal

import httpx
import pytest

from foodorder.api import FoodApi
from foodorder.composer import OrderComposer
from foodorder.errors import ApiError
from foodorder.models import Item
from foodorder.submitter import build_order
from tests.fakes import FOOD_PAYLOAD


def make_api(handler):
    client = httpx.AsyncClient(base_url="http://api.test", transport=httpx.MockTransport(handler))
    return FoodApi(client=client)


async def test_get_food_parses_item_and_extras():
    def handler(request):
        assert request.method == "GET"
        assert request.url.path == "/foods/1"
        return httpx.Response(200, json=FOOD_PAYLOAD)

    item = await make_api(handler).get_food(1)

    assert item.id == 1
    assert item.price == Decimal("10")
    assert [(extra.id, extra.value) for extra in item.extras] == [(1, Decimal("2")), (2, Decimal("3"))]


async def test_favorites_endpoints():
    seen = []

    def handler(request):
        seen.append((request.method, request.url.path, request.content))
        return httpx.Response(201 if request.method == "POST" else 200, json={})

    api = make_api(handler)
    item = Item.from_payload(FOOD_PAYLOAD)

    await api.add_favorite(item)
    await api.remove_favorite(item.id)

    assert seen[0][0:2] == ("POST", "/favorites")
    assert json.loads(seen[0][2])["name"] == "Ao molho"
    assert seen[1][0:2] == ("DELETE", "/favorites/1")


async def test_create_order_posts_payload_without_id():
    bodies = []

    def handler(request):
        if request.method == "GET":
            return httpx.Response(200, json=[{"id": 1}, {"id": 2}])
        bodies.append(json.loads(request.content))
        return httpx.Response(201, json=dict(bodies[-1], id=3))

    api = make_api(handler)
    composer = OrderComposer()
    composer.initialize(Item.from_payload(FOOD_PAYLOAD))

    orders = await api.list_orders()
    created = await api.create_order(build_order(composer.snapshot(), display_number=len(orders) + 1))

    assert created["id"] == 3
    assert "id" not in bodies[0]
    assert bodies[0]["quantity"] == 1
    assert len(bodies[0]["extras"]) == 2


async def test_non_success_status_raises_api_error():
    api = make_api(lambda request: httpx.Response(404, text="Not Found"))

    with pytest.raises(ApiError) as excinfo:
        await api.get_food(99)

    assert excinfo.value.status_code == 404


async def test_empty_body_is_tolerated():
    api = make_api(lambda request: httpx.Response(204))

    await api.remove_favorite(1)


async def test_get_food_with_empty_body_raises_api_error():
    api = make_api(lambda request: httpx.Response(200, content=b""))

    with pytest.raises(ApiError) as excinfo:
        await api.get_food(1)

    assert excinfo.value.status_code == 200


async def test_get_food_with_non_object_body_raises_api_error():
    api = make_api(lambda request: httpx.Response(200, json=[FOOD_PAYLOAD]))

    with pytest.raises(ApiError):
        await api.get_food(1)


async def test_list_orders_rejects_non_json_body():
    api = make_api(lambda request: httpx.Response(200, text="OK"))

    with pytest.raises(ApiError):
        await api.list_orders()


async def test_list_orders_rejects_object_body():
    api = make_api(lambda request: httpx.Response(200, json={"ok": True, "raw": "OK"}))

    with pytest.raises(ApiError):
        await api.list_orders()


def test_item_from_non_object_payload_raises_value_error():
    with pytest.raises(ValueError):
        Item.from_payload(None)
