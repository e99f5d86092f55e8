"""Runtime infrastructure for grocerybill.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Billing configuration via load_billing_config(), BillingConfig

Bill file loading lives in ``grocerybill.runtime.bill_files`` and is not
re-exported here, since it depends on the domain package which itself
uses the logger.

Usage:
    from grocerybill.runtime import get_logger, load_billing_config

    logger = get_logger(__name__)
    config = load_billing_config()
"""

from grocerybill.runtime.config import CONFIG_ENV_VAR, BillingConfig, BillingConfigError, load_billing_config
from grocerybill.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Config
    "BillingConfig",
    "BillingConfigError",
    "load_billing_config",
    "CONFIG_ENV_VAR",
]
