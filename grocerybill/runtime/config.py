"""Runtime loader for billing configuration.

The configuration only affects presentation outside the core bill types:
which store name and ledger accounts a bill is exported under.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from grocerybill.runtime.logging import get_logger

logger = get_logger(__name__)

CONFIG_ENV_VAR = "GROCERYBILL_CONFIG"


class BillingConfigError(ValueError):
    """The billing config file exists but cannot be used."""


@dataclass(frozen=True)
class BillingConfig:
    """Settings used when a bill leaves the process (ledger export, CLI)."""

    store_name: str = "Grocery Store"
    currency: str = "CAD"
    expense_account: str = "Expenses:Food:Grocery"
    discount_account: str = "Income:Discounts:PreferredCustomer"
    payment_account: str = "Assets:Cash"


@lru_cache(maxsize=4)
def load_billing_config(config_path: str | None = None) -> BillingConfig:
    """
    Load billing configuration from TOML.

    Resolution order: explicit ``config_path``, then the GROCERYBILL_CONFIG
    environment variable, then built-in defaults.

    Expected layout::

        store_name = "Corner Market"

        [ledger]
        currency = "CAD"
        expense_account = "Expenses:Food:Grocery"
        discount_account = "Income:Discounts"
        payment_account = "Assets:Cash"

    Raises:
        FileNotFoundError: if an explicitly named file does not exist.
        BillingConfigError: if the file is not valid TOML or has the wrong shape.
    """
    raw_path = config_path if config_path is not None else os.environ.get(CONFIG_ENV_VAR)
    if not raw_path:
        logger.debug("No billing config given, using defaults")
        return BillingConfig()

    path = Path(raw_path)
    if not path.exists():
        raise FileNotFoundError(f"Billing config file not found: {path}")
    if not path.is_file():
        raise BillingConfigError(f"{path}: not a regular file")

    with open(path, "rb") as f:
        try:
            data = tomllib.load(f)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
            raise BillingConfigError(f"{path}: {exc}") from exc

    defaults = BillingConfig()
    ledger = data.get("ledger", {})
    if not isinstance(ledger, dict):
        raise BillingConfigError(f"{path}: [ledger] must be a table")
    config = BillingConfig(
        store_name=str(data.get("store_name", defaults.store_name)).strip(),
        currency=str(ledger.get("currency", defaults.currency)).strip(),
        expense_account=str(ledger.get("expense_account", defaults.expense_account)).strip(),
        discount_account=str(ledger.get("discount_account", defaults.discount_account)).strip(),
        payment_account=str(ledger.get("payment_account", defaults.payment_account)).strip(),
    )
    logger.debug("Loaded billing config from %s", path)
    return config
