"""Opt-in sanity checks for bill entries.

The bill types accept any numbers. These checks are only applied when a
caller asks for them (``load_bill(..., strict=True)``), since rejecting a
negative price changes what a previously accepted bill produces.
"""

from __future__ import annotations

from grocerybill.domain.bill_models import Item
from grocerybill.domain.errors import ValidationError


def validate_item(item: Item) -> None:
    """Reject negative prices/discounts and discounts above the price."""
    if item.price < 0:
        raise ValidationError(f"{item.name}: price must not be negative (got {item.price})")
    if item.discount < 0:
        raise ValidationError(f"{item.name}: discount must not be negative (got {item.discount})")
    if item.discount > item.price:
        raise ValidationError(f"{item.name}: discount {item.discount} exceeds price {item.price}")


def validate_quantity(quantity: int) -> None:
    if quantity < 0:
        raise ValidationError(f"quantity must not be negative (got {quantity})")

