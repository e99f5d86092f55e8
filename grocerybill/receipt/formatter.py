"""Format bill entries as human-readable receipt text.

All numbers are rendered with exactly two decimal places. The helpers here
only know about items and lines; choosing which helper to use for an entry
is up to the bill variant.
"""

from __future__ import annotations

from decimal import Decimal

from grocerybill.domain.bill_models import BillLine, Item


def _rule(title_line: str) -> str:
    return "-" * len(title_line)


def format_header(title: str, clerk_name: str) -> list[str]:
    """Title banner and clerk attribution."""
    return [f"----- Receipt ({title}) -----", f"Clerk: {clerk_name}"]


def format_footer(title: str) -> list[str]:
    """Closing rule matching the banner width, then a blank line."""
    banner = format_header(title, "")[0]
    return [_rule(banner), ""]


def format_preferred_status(preferred: bool) -> str:
    return f"Preferred customer: {'YES' if preferred else 'NO'}"


def format_item_line(item: Item) -> str:
    """Flat-model entry with both price and discount columns."""
    return f"{item.name:<12}  Price: {item.price:6.2f}  Discount: {item.discount:5.2f}"


def format_discounted_item_line(item: Item) -> str:
    after = item.price - item.discount
    return f"{item.name:<12}  After: {after:6.2f}  (Orig: {item.price:5.2f}, Disc: {item.discount:4.2f})"


def format_undiscounted_item_line(item: Item) -> str:
    return f"{item.name:<12}  Price: {item.price:6.2f} (No discount)"


def format_bill_line(line: BillLine) -> str:
    """Quantity-model entry at list price."""
    item = line.require_item()
    return f"{line.quantity}x {item.name:<10}  Line: {line.get_line_total():6.2f} (Unit: {item.price:5.2f})"


def format_discounted_bill_line(line: BillLine) -> str:
    item = line.require_item()
    after = (item.price - item.discount) * line.quantity
    return (
        f"{line.quantity}x {item.name:<10}  After: {after:6.2f} "
        f"(Orig/unit: {item.price:5.2f}, Disc/unit: {item.discount:4.2f})"
    )


def format_total(total: Decimal) -> str:
    return f"Total: {total:.2f}"


def format_discount_summary(count: int, amount: Decimal, percent: Decimal) -> list[str]:
    return [
        f"Discount count: {count}",
        f"Discount amount: {amount:.2f}",
        f"Discount percent: {percent:.2f}%",
    ]
