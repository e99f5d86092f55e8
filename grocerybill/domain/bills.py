"""Bill variants for the flat and quantity billing models.

``GroceryBill`` holds single items, ``GroceryBillV2`` holds quantity lines.
Each has a ``Discount`` specialization taking a preferred-customer flag.
Arithmetic is delegated to a pricing policy over ``(item, quantity)``
pairs, so the four classes differ only in how they store entries, how
they count discounts and how they lay out receipts.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, ClassVar, Generic, TextIO, TypeVar

from grocerybill.domain.bill_models import BillLine, Employee, Item
from grocerybill.domain.pricing import (
    STANDARD_PRICING,
    ZERO,
    CountingMode,
    PricedEntry,
    PricingPolicy,
    base_total,
    pricing_policy_for,
)
from grocerybill.receipt import formatter as receipt_format
from grocerybill.runtime.logging import get_logger

logger = get_logger(__name__)

EntryT = TypeVar("EntryT", Item, BillLine)


class _Bill(ABC, Generic[EntryT]):
    """Entry storage, totals and receipt framing shared by all variants."""

    receipt_title: ClassVar[str]
    counting_mode: ClassVar[CountingMode]

    def __init__(self, clerk: Employee) -> None:
        self._clerk = clerk
        self._entries: list[EntryT] = []
        self._pricing: PricingPolicy = STANDARD_PRICING

    @property
    def clerk(self) -> Employee:
        return self._clerk

    @property
    def entries(self) -> tuple[EntryT, ...]:
        return tuple(self._entries)

    def add(self, entry: EntryT) -> None:
        self._entries.append(entry)
        logger.debug("%s: added entry #%d", type(self).__name__, len(self._entries))

    @abstractmethod
    def priced_entries(self) -> list[PricedEntry]:
        """Entries as (item, quantity) pairs, in insertion order."""

    def get_base_total(self) -> Decimal:
        """Total before any discount, whatever the pricing policy."""
        return base_total(self.priced_entries())

    def get_total(self) -> Decimal:
        return self._pricing.compute_total(self.priced_entries())

    @abstractmethod
    def _entry_lines(self) -> list[str]:
        """One receipt line per entry."""

    def _summary_lines(self) -> list[str]:
        return [receipt_format.format_total(self.get_total())]

    def _preamble_lines(self) -> list[str]:
        return []

    def format_receipt(self) -> str:
        """Render the receipt as text, one entry per line in insertion order."""
        lines = receipt_format.format_header(self.receipt_title, self._clerk.name)
        lines.extend(self._preamble_lines())
        lines.extend(self._entry_lines())
        lines.extend(self._summary_lines())
        lines.extend(receipt_format.format_footer(self.receipt_title))
        return "\n".join(lines) + "\n"

    def print_receipt(self, file: TextIO | None = None) -> None:
        """Write the receipt to ``file`` (stdout by default)."""
        out = file if file is not None else sys.stdout
        out.write(self.format_receipt())


class _DiscountMixin:
    """Preferred-customer flag and discount statistics.

    Mixed in ahead of a concrete bill; replaces its pricing policy with the
    one the flag selects.
    """

    _pricing: PricingPolicy
    counting_mode: ClassVar[CountingMode]

    if TYPE_CHECKING:

        def priced_entries(self) -> list[PricedEntry]: ...

    def _init_discount(self, preferred: bool) -> None:
        self._preferred = preferred
        self._pricing = pricing_policy_for(preferred)

    @property
    def preferred(self) -> bool:
        return self._preferred

    def _preamble_lines(self) -> list[str]:
        return [receipt_format.format_preferred_status(self._preferred)]

    def get_discount_count(self) -> int:
        if not self._preferred:
            return 0
        return self._pricing.discount_count(self.priced_entries(), self.counting_mode)

    def get_discount_amount(self) -> Decimal:
        if not self._preferred:
            return ZERO
        return self._pricing.discount_amount(self.priced_entries())

    def get_discount_percent(self) -> Decimal:
        if not self._preferred:
            return ZERO
        return self._pricing.discount_percent(self.priced_entries())

    def _summary_lines(self) -> list[str]:
        return super()._summary_lines() + receipt_format.format_discount_summary(  # type: ignore[misc]
            self.get_discount_count(),
            self.get_discount_amount(),
            self.get_discount_percent(),
        )


class GroceryBill(_Bill[Item]):
    """Flat bill: every entry is one item bought once."""

    receipt_title = "GroceryBill"
    counting_mode = CountingMode.PER_ENTRY

    def priced_entries(self) -> list[PricedEntry]:
        return [(item, 1) for item in self._entries]

    def _entry_lines(self) -> list[str]:
        return [receipt_format.format_item_line(item) for item in self._entries]


class DiscountBill(_DiscountMixin, GroceryBill):
    """Flat bill that applies item discounts for preferred customers."""

    receipt_title = "DiscountBill"

    def __init__(self, clerk: Employee, preferred: bool) -> None:
        super().__init__(clerk)
        self._init_discount(preferred)

    def _entry_lines(self) -> list[str]:
        lines = []
        for item in self._entries:
            if self._preferred and item.has_discount:
                lines.append(receipt_format.format_discounted_item_line(item))
            else:
                lines.append(receipt_format.format_undiscounted_item_line(item))
        return lines


class GroceryBillV2(_Bill[BillLine]):
    """Quantity bill: every entry is a line of item times quantity."""

    receipt_title = "GroceryBillV2"
    counting_mode = CountingMode.PER_UNIT

    def priced_entries(self) -> list[PricedEntry]:
        return [(line.require_item(), line.quantity) for line in self._entries]

    def _entry_lines(self) -> list[str]:
        return [receipt_format.format_bill_line(line) for line in self._entries]


class DiscountBillV2(_DiscountMixin, GroceryBillV2):
    """Quantity bill that applies per-unit discounts for preferred customers."""

    receipt_title = "DiscountBillV2"

    def __init__(self, clerk: Employee, preferred: bool) -> None:
        super().__init__(clerk)
        self._init_discount(preferred)

    def _entry_lines(self) -> list[str]:
        lines = []
        for line in self._entries:
            if self._preferred and line.require_item().has_discount:
                lines.append(receipt_format.format_discounted_bill_line(line))
            else:
                lines.append(receipt_format.format_bill_line(line))
        return lines

