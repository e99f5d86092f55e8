"""Core domain models for grocerybill.

This package provides:
- Employee, Item, BillLine: value types for bill entries
- GroceryBill, DiscountBill: flat billing model
- GroceryBillV2, DiscountBillV2: quantity billing model
- StandardPricing, PreferredCustomerPricing: pricing policies

Usage:
    from grocerybill.domain import DiscountBill, Employee, Item
"""

from grocerybill.domain.bill_models import BillLine, Employee, Item, to_decimal
from grocerybill.domain.bills import DiscountBill, DiscountBillV2, GroceryBill, GroceryBillV2
from grocerybill.domain.errors import BillFileError, MissingItemError, ValidationError
from grocerybill.domain.pricing import (
    CountingMode,
    PreferredCustomerPricing,
    StandardPricing,
    pricing_policy_for,
)

__all__ = [
    # Values
    "Employee",
    "Item",
    "BillLine",
    "to_decimal",
    # Bills
    "GroceryBill",
    "DiscountBill",
    "GroceryBillV2",
    "DiscountBillV2",
    # Pricing
    "CountingMode",
    "StandardPricing",
    "PreferredCustomerPricing",
    "pricing_policy_for",
    # Errors
    "MissingItemError",
    "ValidationError",
    "BillFileError",
]
