"""Sample bills covering all four variants."""

from __future__ import annotations

from grocerybill.domain.bill_models import BillLine, Employee, Item
from grocerybill.domain.bills import DiscountBill, DiscountBillV2, GroceryBill, GroceryBillV2

SAMPLE_CLERK = "Ana"

SAMPLE_ITEMS = (
    Item("Milk", "3.00", "0.50"),
    Item("Bread", "2.00", "0.00"),
    Item("Eggs", "4.25", "0.75"),
    Item("Soap", "5.00", "1.00"),
)

SAMPLE_QUANTITIES = (2, 1, 1, 3)


def _line(item: Item, quantity: int) -> BillLine:
    line = BillLine()
    line.set_item(item)
    line.set_quantity(quantity)
    return line


def build_sample_bills() -> list[GroceryBill | GroceryBillV2]:
    """One bill of each variant over the same basket, discount bills preferred."""
    clerk = Employee(SAMPLE_CLERK)

    flat = GroceryBill(clerk)
    flat_discount = DiscountBill(clerk, preferred=True)
    for item in SAMPLE_ITEMS:
        flat.add(item)
        flat_discount.add(item)

    lines = GroceryBillV2(clerk)
    lines_discount = DiscountBillV2(clerk, preferred=True)
    for item, quantity in zip(SAMPLE_ITEMS, SAMPLE_QUANTITIES):
        lines.add(_line(item, quantity))
        lines_discount.add(_line(item, quantity))

    return [flat, flat_discount, lines, lines_discount]
