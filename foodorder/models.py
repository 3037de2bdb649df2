"""Domain models for the food detail screen."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any


def to_money(raw: Any) -> Decimal:
    """Parse a JSON number (or numeric string) into a Decimal amount."""
    if raw is None:
        return Decimal("0")
    if isinstance(raw, Decimal):
        return raw
    try:
        return Decimal(str(raw))
    except InvalidOperation as exc:
        raise ValueError(f"Invalid monetary amount: {raw!r}") from exc


def _money_to_json(amount: Decimal) -> float | int:
    if amount == amount.to_integral_value():
        return int(amount)
    return float(amount)


@dataclass(frozen=True)
class ExtraOption:
    """An optional add-on offered with a food item."""

    id: int
    name: str
    value: Decimal

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Extra {self.id!r} has a negative value")

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> ExtraOption:
        """Parse one extra from a catalog record."""
        return cls(id=payload["id"], name=str(payload.get("name", "")), value=to_money(payload.get("value")))

    def to_payload(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "value": _money_to_json(self.value)}


@dataclass(frozen=True)
class ExtraLine:
    """An extra option paired with the quantity selected on screen."""

    id: int
    name: str
    value: Decimal
    quantity: int = 0

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError(f"Extra {self.id!r} quantity cannot be negative")

    @classmethod
    def from_option(cls, option: ExtraOption) -> ExtraLine:
        """Start a line at quantity 0."""
        return cls(id=option.id, name=option.name, value=option.value)

    @property
    def line_total(self) -> Decimal:
        """Value times quantity."""
        return self.value * self.quantity

    def with_quantity(self, quantity: int) -> ExtraLine:
        """Copy of this line with a new quantity."""
        return replace(self, quantity=quantity)

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "value": _money_to_json(self.value),
            "quantity": self.quantity,
        }


@dataclass(frozen=True)
class Item:
    """A food item as served by the catalog."""

    id: int | None
    name: str
    description: str
    price: Decimal
    image_url: str = ""
    extras: tuple[ExtraOption, ...] = field(default_factory=tuple)
    formatted_price: str | None = None

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"Item {self.id!r} has a negative price")
        seen: set[int] = set()
        for extra in self.extras:
            if extra.id in seen:
                raise ValueError(f"Item {self.id!r} lists extra {extra.id!r} twice")
            seen.add(extra.id)

    @classmethod
    def unloaded(cls) -> Item:
        """Zero-valued placeholder shown until the catalog fetch completes."""
        return cls(id=None, name="", description="", price=Decimal("0"))

    @property
    def is_loaded(self) -> bool:
        """False for the placeholder shown before the fetch completes."""
        return self.id is not None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Item:
        """Parse a catalog record, extras included."""
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a food record, got {type(payload).__name__}")
        return cls(
            id=payload["id"],
            name=str(payload.get("name", "")),
            description=str(payload.get("description", "")),
            price=to_money(payload.get("price")),
            image_url=str(payload.get("image_url", "")),
            extras=tuple(ExtraOption.from_payload(extra) for extra in payload.get("extras") or []),
            formatted_price=payload.get("formattedPrice"),
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": _money_to_json(self.price),
            "image_url": self.image_url,
            "extras": [extra.to_payload() for extra in self.extras],
        }


@dataclass(frozen=True)
class Order:
    """An order ready for the order store.

    The store assigns the identifier. ``display_number`` is a best-effort count
    shown to the user and is never transmitted.
    """

    product_id: int | None
    name: str
    description: str
    price: Decimal
    image_url: str
    extras: tuple[ExtraLine, ...]
    quantity: int
    display_number: int | None = None

    def to_payload(self) -> dict[str, Any]:
        """Request body for the order store, without any identifier."""
        return {
            "product_id": self.product_id,
            "name": self.name,
            "description": self.description,
            "price": _money_to_json(self.price),
            "image_url": self.image_url,
            "extras": [line.to_payload() for line in self.extras],
            "quantity": self.quantity,
        }


class FavoriteState(Enum):
    """Local favorite status of the item on screen."""

    NOT_FAVORITE = "not_favorite"
    FAVORITE = "favorite"
