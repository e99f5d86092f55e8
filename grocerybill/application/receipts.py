"""Receipt rendering workflow orchestration."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from grocerybill.domain.bills import GroceryBill, GroceryBillV2
from grocerybill.domain.errors import BillFileError, ValidationError
from grocerybill.receipt.ledger_export import format_bill_beancount
from grocerybill.runtime import BillingConfigError, get_logger, load_billing_config
from grocerybill.runtime.bill_files import load_bill

logger = get_logger(__name__)


@dataclass(frozen=True)
class ReceiptRenderRequest:
    """Typed request for rendering one bill file."""

    bill_path: Path
    strict: bool = False
    ledger_date: datetime.date | None = None
    config_path: str | None = None


@dataclass(frozen=True)
class ReceiptRenderResult:
    """Result of rendering one bill file."""

    status: Literal["ok", "error"]
    receipt: str | None = None
    ledger_entry: str | None = None
    bill: GroceryBill | GroceryBillV2 | None = None
    error: str | None = None


def run_receipt_render(request: ReceiptRenderRequest) -> ReceiptRenderResult:
    """Load a bill file and render its receipt (and optional ledger entry)."""
    try:
        bill = load_bill(request.bill_path, strict=request.strict)
    except FileNotFoundError as exc:
        return ReceiptRenderResult(status="error", error=str(exc))
    except ValidationError as exc:
        logger.warning("Bill rejected by strict validation: %s", exc)
        return ReceiptRenderResult(status="error", error=f"Validation failed: {exc}")
    except BillFileError as exc:
        return ReceiptRenderResult(status="error", error=f"Invalid bill file: {exc}")

    ledger_entry = None
    if request.ledger_date is not None:
        try:
            config = load_billing_config(request.config_path)
        except FileNotFoundError as exc:
            return ReceiptRenderResult(status="error", error=str(exc))
        except BillingConfigError as exc:
            return ReceiptRenderResult(status="error", error=f"Invalid billing config: {exc}")
        ledger_entry = format_bill_beancount(bill, request.ledger_date, config=config)

    return ReceiptRenderResult(
        status="ok",
        receipt=bill.format_receipt(),
        ledger_entry=ledger_entry,
        bill=bill,
    )
