#!/usr/bin/env python3

import argparse
import datetime
import logging
from collections.abc import Sequence
from pathlib import Path

from grocerybill.runtime import get_logger, set_log_level

logger = get_logger(__name__)


def _print_error(error: str) -> None:
    for line in error.splitlines():
        print(line)


def _parse_date(value: str) -> datetime.date:
    try:
        return datetime.date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD") from exc


def _cmd_receipt(args: argparse.Namespace) -> int:
    from grocerybill.application.receipts import ReceiptRenderRequest, run_receipt_render

    ledger_date = None
    if args.beancount:
        ledger_date = args.date or datetime.date.today()

    result = run_receipt_render(
        ReceiptRenderRequest(
            bill_path=Path(args.bill),
            strict=args.strict,
            ledger_date=ledger_date,
            config_path=args.config,
        )
    )
    if result.status == "error":
        assert result.error is not None
        logger.error("%s", result.error)
        _print_error(result.error)
        return 1

    assert result.receipt is not None
    print(result.receipt, end="")
    if result.ledger_entry is not None:
        print(result.ledger_entry, end="")
    return 0


def _cmd_demo(args: argparse.Namespace) -> int:
    from grocerybill.application.demo import build_sample_bills

    for bill in build_sample_bills():
        bill.print_receipt()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Itemized grocery bill receipts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  receipt <bill.toml> [--strict] [--beancount [--date YYYY-MM-DD]]
                             Print the receipt for a bill file
  demo                       Print receipts for a sample basket
""",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    receipt_parser = subparsers.add_parser("receipt", help="Print the receipt for a bill file")
    receipt_parser.add_argument("bill", help="Path to bill description (TOML)")
    receipt_parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject negative amounts, discounts above price and negative quantities",
    )
    receipt_parser.add_argument("--beancount", action="store_true", help="Also print a beancount transaction")
    receipt_parser.add_argument(
        "--date", type=_parse_date, default=None, help="Ledger transaction date (default: today)"
    )
    receipt_parser.add_argument(
        "--config", default=None, help="Billing config TOML (default: $GROCERYBILL_CONFIG or built-in defaults)"
    )

    subparsers.add_parser("demo", help="Print receipts for a sample basket")

    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "receipt":
        return _cmd_receipt(args)
    if args.command == "demo":
        return _cmd_demo(args)

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
