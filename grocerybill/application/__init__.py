"""Application workflows."""

from grocerybill.application.demo import build_sample_bills
from grocerybill.application.receipts import ReceiptRenderRequest, ReceiptRenderResult, run_receipt_render

__all__ = [
    "build_sample_bills",
    "ReceiptRenderRequest",
    "ReceiptRenderResult",
    "run_receipt_render",
]
