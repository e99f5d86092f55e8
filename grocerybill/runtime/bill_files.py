"""Load bill descriptions from TOML files.

File layout::

    clerk = "Ana"
    model = "quantity"      # "flat" (default) or "quantity"
    preferred = true        # optional; present => discount variant

    [[entries]]
    name = "Soap"
    price = 5.00
    discount = 1.00         # optional, default 0
    quantity = 3            # quantity model only, default 1
"""

from __future__ import annotations

import tomllib
from decimal import Decimal
from pathlib import Path
from typing import Any

from grocerybill.domain.bill_models import BillLine, Employee, Item, to_decimal
from grocerybill.domain.bills import DiscountBill, DiscountBillV2, GroceryBill, GroceryBillV2
from grocerybill.domain.errors import BillFileError
from grocerybill.domain.validation import validate_item, validate_quantity
from grocerybill.runtime.logging import get_logger

logger = get_logger(__name__)

MODELS = ("flat", "quantity")


def _parse_item(raw: dict[str, Any], index: int) -> Item:
    name = str(raw.get("name", "")).strip()
    if not name:
        raise BillFileError(f"entry {index}: missing name")
    if "price" not in raw:
        raise BillFileError(f"entry {index} ({name}): missing price")
    try:
        price = to_decimal(raw["price"])
        discount = to_decimal(raw.get("discount", Decimal("0")))
    except (ArithmeticError, TypeError, ValueError) as exc:
        raise BillFileError(f"entry {index} ({name}): invalid amount: {exc}") from exc
    if not price.is_finite() or not discount.is_finite():
        raise BillFileError(f"entry {index} ({name}): amounts must be finite numbers")
    return Item(name, price, discount)


def _parse_quantity(raw: dict[str, Any], index: int) -> int:
    quantity = raw.get("quantity", 1)
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise BillFileError(f"entry {index}: quantity must be an integer (got {quantity!r})")
    return quantity


def build_bill(data: dict[str, Any], strict: bool = False) -> GroceryBill | GroceryBillV2:
    """Build a bill from an already-parsed description mapping."""
    clerk_name = str(data.get("clerk", "")).strip()
    if not clerk_name:
        raise BillFileError("missing clerk")

    model = str(data.get("model", "flat")).strip().lower()
    if model not in MODELS:
        raise BillFileError(f"unknown bill model {model!r} (expected one of {', '.join(MODELS)})")

    clerk = Employee(clerk_name)
    preferred = data.get("preferred")
    if preferred is not None and not isinstance(preferred, bool):
        raise BillFileError(f"preferred must be true or false (got {preferred!r})")

    bill: GroceryBill | GroceryBillV2
    if model == "flat":
        bill = GroceryBill(clerk) if preferred is None else DiscountBill(clerk, preferred)
    else:
        bill = GroceryBillV2(clerk) if preferred is None else DiscountBillV2(clerk, preferred)

    entries = data.get("entries", [])
    if not isinstance(entries, list):
        raise BillFileError("entries must be an array of tables")

    for index, raw in enumerate(entries, 1):
        if not isinstance(raw, dict):
            raise BillFileError(f"entry {index}: expected a table")
        item = _parse_item(raw, index)
        if strict:
            validate_item(item)

        if isinstance(bill, GroceryBill):
            if "quantity" in raw:
                raise BillFileError(f"entry {index} ({item.name}): quantity is not allowed on a flat bill")
            bill.add(item)
            continue

        quantity = _parse_quantity(raw, index)
        if strict:
            validate_quantity(quantity)
        line = BillLine()
        line.set_item(item)
        line.set_quantity(quantity)
        bill.add(line)

    return bill


def load_bill(path: Path | str, strict: bool = False) -> GroceryBill | GroceryBillV2:
    """
    Load one bill from a TOML file.

    Args:
        path: Bill description file.
        strict: Also reject negative amounts, discounts above price and
                negative quantities.

    Raises:
        FileNotFoundError: the file does not exist.
        BillFileError: the file is not valid TOML or is missing fields.
        ValidationError: strict mode rejected an entry.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Bill file not found: {path}")
    if not path.is_file():
        raise BillFileError(f"{path}: not a regular file")

    with open(path, "rb") as f:
        try:
            data = tomllib.load(f, parse_float=Decimal)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
            raise BillFileError(f"{path}: {exc}") from exc

    bill = build_bill(data, strict=strict)
    logger.info("Loaded %s with %d entries from %s", type(bill).__name__, len(bill.entries), path.name)
    return bill
