from decimal import Decimal

import pytest

from foodorder.composer import OrderComposer
from foodorder.models import ExtraOption, Item
from tests.fakes import make_item, plain_formatter


@pytest.fixture
def composer():
    composer = OrderComposer(formatter=plain_formatter)
    composer.initialize(make_item())
    return composer


def test_initialize_creates_one_zero_line_per_option_in_catalog_order():
    extras = tuple((extra_id, f"Extra {extra_id}", "1.50") for extra_id in (7, 3, 9, 1))
    composer = OrderComposer(formatter=plain_formatter)

    snapshot = composer.initialize(make_item(extras=extras))

    assert [line.id for line in snapshot.extra_lines] == [7, 3, 9, 1]
    assert all(line.quantity == 0 for line in snapshot.extra_lines)
    assert snapshot.base_quantity == 1


def test_initialize_accepts_explicit_options():
    composer = OrderComposer(formatter=plain_formatter)
    options = [ExtraOption(id=5, name="Queijo", value=Decimal("4"))]

    snapshot = composer.initialize(make_item(), options)

    assert [line.id for line in snapshot.extra_lines] == [5]


def test_initialize_replaces_previous_state(composer):
    composer.increment_extra(1)
    composer.increment_base()

    composer.initialize(make_item(extras=((9, "C", "1.00"),)))

    assert [(line.id, line.quantity) for line in composer.extra_lines] == [(9, 0)]
    assert composer.base_quantity == 1


def test_total_scenario(composer):
    assert composer.compute_total() == "10.00"

    composer.increment_extra(1)
    composer.increment_extra(1)
    composer.increment_extra(2)
    assert composer.compute_total() == "17.00"

    composer.increment_base()
    assert composer.compute_total() == "27.00"


def test_default_formatter_renders_reais():
    composer = OrderComposer()
    composer.initialize(make_item(price="19.90"))

    assert composer.compute_total() == "R$ 19,90"


def test_increment_then_decrement_restores_quantity(composer):
    for _ in range(5):
        composer.increment_extra(2)
    for _ in range(5):
        composer.decrement_extra(2)

    assert composer.extra_quantity(2) == 0


def test_decrement_extra_never_goes_negative(composer):
    composer.decrement_extra(1)
    composer.increment_extra(1)
    composer.decrement_extra(1)
    composer.decrement_extra(1)

    assert composer.extra_quantity(1) == 0


def test_decrement_base_floor_is_one(composer):
    snapshot = composer.decrement_base()

    assert snapshot.base_quantity == 1
    assert composer.compute_total() == "10.00"


def test_increment_base_is_unbounded(composer):
    for _ in range(999):
        composer.increment_base()

    assert composer.base_quantity == 1000
    assert composer.subtotal() == Decimal("10000.00")


def test_unknown_extra_id_is_ignored(composer):
    before = composer.snapshot()

    assert composer.increment_extra(404) == before
    assert composer.decrement_extra(404) == before


def test_each_extra_unit_changes_total_by_its_value(composer):
    base = composer.subtotal()

    composer.increment_extra(2)
    assert composer.subtotal() - base == Decimal("3.00")

    composer.increment_extra(1)
    assert composer.subtotal() - base == Decimal("5.00")


def test_compute_total_is_stable_and_memoized_on_state():
    calls = []

    def counting_formatter(amount):
        calls.append(amount)
        return f"{amount:.2f}"

    composer = OrderComposer(formatter=counting_formatter)
    composer.initialize(make_item())

    assert composer.compute_total() == composer.compute_total()
    assert len(calls) == 1

    composer.increment_extra(1)
    assert composer.compute_total() == "12.00"
    assert len(calls) == 2


def test_mutation_does_not_alias_earlier_snapshots(composer):
    earlier = composer.snapshot()

    composer.increment_extra(1)

    assert earlier.extra_lines[0].quantity == 0
    assert composer.extra_lines[0].quantity == 1
    assert composer.extra_lines[1] is earlier.extra_lines[1]


def test_unloaded_item_totals_zero():
    composer = OrderComposer(formatter=plain_formatter)

    assert composer.compute_total() == "0.00"
    assert composer.extra_lines == ()


def test_item_from_payload_rejects_negative_price():
    with pytest.raises(ValueError):
        Item.from_payload({"id": 1, "name": "x", "price": -1, "extras": []})
