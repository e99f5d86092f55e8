from __future__ import annotations

from decimal import Decimal

from grocerybill.domain import CountingMode, Item, PreferredCustomerPricing, StandardPricing, pricing_policy_for

SOAP = Item("Soap", Decimal("5.00"), Decimal("1.00"))
RICE = Item("Rice", Decimal("2.50"))


def test_pricing_policy_for_flag() -> None:
    assert isinstance(pricing_policy_for(True), PreferredCustomerPricing)
    assert isinstance(pricing_policy_for(False), StandardPricing)
    assert pricing_policy_for(True).applies_discounts is True
    assert pricing_policy_for(False).applies_discounts is False


def test_standard_pricing_reports_no_discounts() -> None:
    entries = [(SOAP, 2), (RICE, 1)]
    policy = StandardPricing()
    assert policy.compute_total(entries) == Decimal("12.50")
    assert policy.discount_count(entries, CountingMode.PER_UNIT) == 0
    assert policy.discount_amount(entries) == Decimal("0")
    assert policy.discount_percent(entries) == Decimal("0")


def test_preferred_pricing_counting_modes() -> None:
    entries = [(SOAP, 4), (RICE, 3), (SOAP, 1)]
    policy = PreferredCustomerPricing()
    assert policy.discount_count(entries, CountingMode.PER_ENTRY) == 2
    assert policy.discount_count(entries, CountingMode.PER_UNIT) == 5


def test_preferred_pricing_accepts_generators() -> None:
    policy = PreferredCustomerPricing()
    assert policy.discount_percent((entry for entry in [(SOAP, 2)])) == Decimal("20")
    assert policy.discount_percent(iter([])) == Decimal("0")
