"""Value types shared by every bill variant."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from grocerybill.domain.errors import MissingItemError

Money = Decimal | int | float | str


def to_decimal(value: Money) -> Decimal:
    """Coerce a numeric input to Decimal, routing floats through str()."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


@dataclass(frozen=True)
class Employee:
    """Clerk a bill is attributed to."""

    name: str


@dataclass(frozen=True)
class Item:
    """A priced good.

    Values are taken as given: a negative price or a discount larger than
    the price is accepted and flows into bill arithmetic unchanged.
    """

    name: str
    price: Decimal
    discount: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        object.__setattr__(self, "price", to_decimal(self.price))
        object.__setattr__(self, "discount", to_decimal(self.discount))

    @property
    def has_discount(self) -> bool:
        return self.discount > 0


@dataclass
class BillLine:
    """An item bought in some quantity.

    Lines may be created empty and filled in with set_item/set_quantity.
    """

    item: Item | None = None
    quantity: int = 0

    def set_item(self, item: Item) -> None:
        self.item = item

    def set_quantity(self, quantity: int) -> None:
        self.quantity = quantity

    def require_item(self) -> Item:
        if self.item is None:
            raise MissingItemError("bill line has no item set")
        return self.item

    def get_line_total(self) -> Decimal:
        return self.require_item().price * self.quantity

    def get_line_discount_total(self) -> Decimal:
        return self.require_item().discount * self.quantity
