from decimal import Decimal

from foodorder.formatting import format_value


def test_formats_cents_with_comma():
    assert format_value(Decimal("17")) == "R$ 17,00"
    assert format_value(Decimal("19.9")) == "R$ 19,90"


def test_groups_thousands():
    assert format_value(Decimal("1234.5")) == "R$ 1.234,50"


def test_rounds_half_up_to_cents():
    assert format_value(Decimal("0.005")) == "R$ 0,01"


def test_accepts_plain_numbers():
    assert format_value(3) == "R$ 3,00"
