"""Smoke tests for basic module wiring."""

from __future__ import annotations

from _pytest.monkeypatch import MonkeyPatch


def test_imports() -> None:
    import grocerybill
    import grocerybill.application
    import grocerybill.cli.main
    import grocerybill.domain
    import grocerybill.receipt.ledger_export
    import grocerybill.runtime
    import grocerybill.runtime.bill_files

    assert grocerybill is not None
    assert grocerybill.application is not None
    assert grocerybill.cli.main is not None
    assert grocerybill.domain is not None
    assert grocerybill.receipt.ledger_export is not None
    assert grocerybill.runtime is not None
    assert grocerybill.runtime.bill_files is not None


def test_formatter_imports_before_domain() -> None:
    # formatter and bills import each other's packages; either order must work.
    import grocerybill.receipt.formatter as formatter

    assert formatter.format_total is not None


def test_logger_namespace() -> None:
    from grocerybill.runtime import get_logger

    assert get_logger("grocerybill.domain.bills").name == "grocerybill.domain.bills"
    assert get_logger("scratch").name == "grocerybill.scratch"


def test_log_level_from_name_or_number() -> None:
    import logging

    from grocerybill.runtime.logging import level_from_env

    assert level_from_env("debug") == logging.DEBUG
    assert level_from_env(" WARNING ") == logging.WARNING
    assert level_from_env("15") == 15
    assert level_from_env("bogus") == logging.INFO
    assert level_from_env("") == logging.INFO


def test_log_level_read_from_environment(monkeypatch: MonkeyPatch) -> None:
    import logging

    from grocerybill.runtime.logging import LOG_LEVEL_ENV_VAR, level_from_env

    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "error")
    assert level_from_env() == logging.ERROR
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR)
    assert level_from_env() == logging.INFO
