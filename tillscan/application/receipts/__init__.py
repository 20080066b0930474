"""Receipt workflows."""

from tillscan.application.receipts.listing import ReceiptListing, run_get_receipt, run_list_receipts
from tillscan.application.receipts.scan import (
    ReceiptScanRequest,
    ReceiptScanResult,
    check_upload_size,
    extract_document_lines,
    process_document,
    run_parse_lines_file,
    run_receipt_scan,
)

__all__ = [
    "ReceiptListing",
    "run_list_receipts",
    "run_get_receipt",
    "ReceiptScanRequest",
    "ReceiptScanResult",
    "check_upload_size",
    "extract_document_lines",
    "process_document",
    "run_parse_lines_file",
    "run_receipt_scan",
]
