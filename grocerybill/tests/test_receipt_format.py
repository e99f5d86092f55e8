"""Tests for receipt text produced by each bill variant."""

from __future__ import annotations

import io
from decimal import Decimal

from _pytest.capture import CaptureFixture
from grocerybill.domain import BillLine, DiscountBill, DiscountBillV2, Employee, GroceryBill, GroceryBillV2, Item

CLERK = Employee("Ana")
MILK = Item("Milk", Decimal("3.00"), Decimal("0.50"))
BREAD = Item("Bread", Decimal("2.00"), Decimal("0.00"))
SOAP = Item("Soap", Decimal("5.00"), Decimal("1.00"))


def _receipt(*lines: str) -> str:
    return "\n".join(lines) + "\n"


def test_grocery_bill_receipt() -> None:
    bill = GroceryBill(CLERK)
    bill.add(MILK)
    bill.add(BREAD)

    assert bill.format_receipt() == _receipt(
        "----- Receipt (GroceryBill) -----",
        "Clerk: Ana",
        "Milk" + " " * 10 + "Price:   3.00  Discount:  0.50",
        "Bread" + " " * 9 + "Price:   2.00  Discount:  0.00",
        "Total: 5.00",
        "-" * 33,
        "",
    )


def test_preferred_discount_bill_receipt() -> None:
    bill = DiscountBill(CLERK, preferred=True)
    bill.add(MILK)
    bill.add(BREAD)

    assert bill.format_receipt() == _receipt(
        "----- Receipt (DiscountBill) -----",
        "Clerk: Ana",
        "Preferred customer: YES",
        "Milk" + " " * 10 + "After:   2.50  (Orig:  3.00, Disc: 0.50)",
        "Bread" + " " * 9 + "Price:   2.00 (No discount)",
        "Total: 4.50",
        "Discount count: 1",
        "Discount amount: 0.50",
        "Discount percent: 10.00%",
        "-" * 34,
        "",
    )


def test_non_preferred_receipt_marks_every_entry_undiscounted() -> None:
    bill = DiscountBill(CLERK, preferred=False)
    bill.add(MILK)
    bill.add(BREAD)
    text = bill.format_receipt()

    assert "Preferred customer: NO" in text
    assert text.count("(No discount)") == 2
    assert "After:" not in text
    assert "Discount percent: 0.00%" in text


def test_grocery_bill_v2_receipt_lines() -> None:
    bill = GroceryBillV2(CLERK)
    bill.add(BillLine(SOAP, 3))
    text = bill.format_receipt()

    assert text.startswith("----- Receipt (GroceryBillV2) -----\nClerk: Ana\n")
    assert "3x Soap" + " " * 8 + "Line:  15.00 (Unit:  5.00)" in text
    assert "Total: 15.00" in text


def test_discount_bill_v2_receipt_lines() -> None:
    bill = DiscountBillV2(CLERK, preferred=True)
    bill.add(BillLine(SOAP, 3))
    bill.add(BillLine(BREAD, 2))
    text = bill.format_receipt()

    assert "3x Soap" + " " * 8 + "After:  12.00 (Orig/unit:  5.00, Disc/unit: 1.00)" in text
    assert "2x Bread" + " " * 7 + "Line:   4.00 (Unit:  2.00)" in text
    assert "Total: 16.00" in text
    assert "Discount count: 3" in text
    assert "Discount amount: 3.00" in text
    assert "Discount percent: 15.79%" in text
    assert text.endswith("-" * 36 + "\n\n")


def test_receipt_lists_every_entry_once_in_order() -> None:
    bill = DiscountBill(CLERK, preferred=True)
    for item in (BREAD, MILK, BREAD):
        bill.add(item)
    body = bill.format_receipt().splitlines()[3:6]

    assert [line.split()[0] for line in body] == ["Bread", "Milk", "Bread"]
    assert f"Total: {bill.get_total():.2f}" in bill.format_receipt()


def test_print_receipt_writes_to_stdout(capsys: CaptureFixture[str]) -> None:
    bill = GroceryBill(CLERK)
    bill.add(MILK)
    bill.print_receipt()

    assert capsys.readouterr().out == bill.format_receipt()


def test_print_receipt_accepts_stream() -> None:
    bill = DiscountBillV2(CLERK, preferred=False)
    bill.add(BillLine(SOAP, 1))
    out = io.StringIO()
    bill.print_receipt(out)

    assert out.getvalue() == bill.format_receipt()
