"""Export bills as beancount transactions.

A bill becomes one transaction: an expense posting per entry at its
undiscounted line total, a discount posting for whatever the preferred
customer saved, and a payment posting for the amount actually charged.
"""

from __future__ import annotations

import datetime
from decimal import Decimal
from typing import Any

from beancount.core import amount, data, flags
from beancount.parser import printer

from grocerybill.domain.bills import DiscountBill, DiscountBillV2, GroceryBill, GroceryBillV2
from grocerybill.runtime.config import BillingConfig, load_billing_config
from grocerybill.runtime.logging import get_logger

logger = get_logger(__name__)


def _posting(
    account: str, number: Decimal, currency: str, meta: dict[str, Any] | None = None
) -> data.Posting:
    return data.Posting(account, amount.Amount(number, currency), None, None, None, meta)


def _entry_name(item_name: str, quantity: int) -> str:
    return f"{item_name} x{quantity}" if quantity != 1 else item_name


def build_bill_transaction(
    bill: GroceryBill | GroceryBillV2,
    txn_date: datetime.date,
    config: BillingConfig | None = None,
    meta: dict[str, Any] | None = None,
) -> data.Transaction:
    """Build a balanced beancount transaction for ``bill``."""
    config = config or load_billing_config()
    currency = config.currency

    txn = data.Transaction(
        meta=meta or {},
        date=txn_date,
        flag=flags.FLAG_OKAY,
        payee=config.store_name,
        narration=f"Receipt by {bill.clerk.name}",
        tags=frozenset(),
        links=frozenset(),
        postings=[],
    )

    for item, quantity in bill.priced_entries():
        txn.postings.append(
            _posting(
                config.expense_account,
                item.price * quantity,
                currency,
                meta={"item": _entry_name(item.name, quantity)},
            )
        )

    if isinstance(bill, (DiscountBill, DiscountBillV2)):
        discount = bill.get_discount_amount()
        if discount != 0:
            txn.postings.append(_posting(config.discount_account, -discount, currency))

    txn.postings.append(_posting(config.payment_account, -bill.get_total(), currency))
    logger.debug("Built ledger transaction with %d postings", len(txn.postings))
    return txn


def format_bill_beancount(
    bill: GroceryBill | GroceryBillV2,
    txn_date: datetime.date,
    config: BillingConfig | None = None,
) -> str:
    """Render ``bill`` as beancount ledger text."""
    return printer.format_entry(build_bill_transaction(bill, txn_date, config=config))
