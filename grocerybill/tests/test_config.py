from __future__ import annotations

from pathlib import Path

import pytest

from _pytest.monkeypatch import MonkeyPatch
from grocerybill.runtime.config import CONFIG_ENV_VAR, BillingConfig, BillingConfigError, load_billing_config


def test_defaults_without_config(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    load_billing_config.cache_clear()

    assert load_billing_config() == BillingConfig()


def test_load_config_from_toml(tmp_path: Path) -> None:
    config_path = tmp_path / "grocerybill.toml"
    config_path.write_text(
        """
store_name = "Corner Market"

[ledger]
currency = "USD"
payment_account = "Liabilities:CreditCard:Visa"
"""
    )

    load_billing_config.cache_clear()
    config = load_billing_config(str(config_path))

    assert config.store_name == "Corner Market"
    assert config.currency == "USD"
    assert config.payment_account == "Liabilities:CreditCard:Visa"
    assert config.expense_account == BillingConfig().expense_account


def test_load_config_from_env(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    config_path = tmp_path / "grocerybill.toml"
    config_path.write_text('store_name = "Env Market"\n')
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_path))
    load_billing_config.cache_clear()

    assert load_billing_config().store_name == "Env Market"
    load_billing_config.cache_clear()


def test_load_config_raises_when_missing(tmp_path: Path) -> None:
    load_billing_config.cache_clear()
    with pytest.raises(FileNotFoundError):
        load_billing_config(str(tmp_path / "does_not_exist.toml"))


def test_load_config_rejects_malformed_toml(tmp_path: Path) -> None:
    config_path = tmp_path / "grocerybill.toml"
    config_path.write_text('store_name = "x\n')
    load_billing_config.cache_clear()

    with pytest.raises(BillingConfigError):
        load_billing_config(str(config_path))


def test_load_config_rejects_non_table_ledger(tmp_path: Path) -> None:
    config_path = tmp_path / "grocerybill.toml"
    config_path.write_text('ledger = "x"\n')
    load_billing_config.cache_clear()

    with pytest.raises(BillingConfigError, match="ledger"):
        load_billing_config(str(config_path))


def test_load_config_rejects_directory(tmp_path: Path) -> None:
    load_billing_config.cache_clear()
    with pytest.raises(BillingConfigError):
        load_billing_config(str(tmp_path))
