"""Pricing policies shared by the flat and quantity bill models.

Every bill entry is reduced to an ``(item, quantity)`` pair before it
reaches a policy; flat-model entries always carry quantity 1. The two
policies differ only in whether per-entry discounts are applied.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from enum import Enum
from typing import Protocol

from grocerybill.domain.bill_models import Item
from grocerybill.runtime.logging import get_logger

logger = get_logger(__name__)

PricedEntry = tuple[Item, int]

ZERO = Decimal("0")


class CountingMode(Enum):
    """How discounted entries are counted."""

    # One per discounted entry, whatever its price.
    PER_ENTRY = "per_entry"
    # Every unit on a discounted line counts.
    PER_UNIT = "per_unit"


class PricingPolicy(Protocol):
    """Total and discount statistics over priced entries."""

    applies_discounts: bool

    def compute_total(self, entries: Iterable[PricedEntry]) -> Decimal: ...

    def discount_count(self, entries: Iterable[PricedEntry], mode: CountingMode) -> int: ...

    def discount_amount(self, entries: Iterable[PricedEntry]) -> Decimal: ...

    def discount_percent(self, entries: Iterable[PricedEntry]) -> Decimal: ...


def base_total(entries: Iterable[PricedEntry]) -> Decimal:
    """Undiscounted total: sum of price * quantity."""
    total = ZERO
    for item, quantity in entries:
        total += item.price * quantity
    return total


class StandardPricing:
    """Regular customers pay list price; discount statistics are all zero."""

    applies_discounts = False

    def compute_total(self, entries: Iterable[PricedEntry]) -> Decimal:
        return base_total(entries)

    def discount_count(self, entries: Iterable[PricedEntry], mode: CountingMode) -> int:
        return 0

    def discount_amount(self, entries: Iterable[PricedEntry]) -> Decimal:
        return ZERO

    def discount_percent(self, entries: Iterable[PricedEntry]) -> Decimal:
        return ZERO


class PreferredCustomerPricing:
    """Preferred customers get each entry's discount taken off its price."""

    applies_discounts = True

    def compute_total(self, entries: Iterable[PricedEntry]) -> Decimal:
        # Subtract per entry, not once at the end, so accumulation order
        # matches the receipt lines.
        total = ZERO
        for item, quantity in entries:
            total += item.price * quantity - item.discount * quantity
        return total

    def discount_count(self, entries: Iterable[PricedEntry], mode: CountingMode) -> int:
        count = 0
        for item, quantity in entries:
            if item.has_discount:
                count += 1 if mode is CountingMode.PER_ENTRY else quantity
        return count

    def discount_amount(self, entries: Iterable[PricedEntry]) -> Decimal:
        amount = ZERO
        for item, quantity in entries:
            amount += item.discount * quantity
        return amount

    def discount_percent(self, entries: Iterable[PricedEntry]) -> Decimal:
        entries = list(entries)
        before = base_total(entries)
        if before == 0:
            logger.debug("Undiscounted total is zero, reporting zero discount percent")
            return ZERO
        return (self.discount_amount(entries) / before) * 100


STANDARD_PRICING = StandardPricing()
PREFERRED_PRICING = PreferredCustomerPricing()


def pricing_policy_for(preferred: bool) -> PricingPolicy:
    """Select the pricing policy for a customer."""
    return PREFERRED_PRICING if preferred else STANDARD_PRICING
