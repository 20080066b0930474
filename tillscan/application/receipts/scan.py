"""Receipt scan workflow orchestration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from tillscan.receipt.ocr_helpers import prepare_document_bytes
from tillscan.receipt.receipt_parser import parse_receipt_lines
from tillscan.runtime import get_logger, get_settings
from tillscan.runtime.errors import TextractError, UploadTooLarge

if TYPE_CHECKING:
    from tillscan.domain.receipt import Receipt
    from tillscan.runtime.receipt_storage import ReceiptStore
    from tillscan.runtime.textract_gateway import TextractGateway

logger = get_logger(__name__)

ScanStatus = Literal[
    "file_not_found",
    "file_too_large",
    "ocr_unavailable",
    "parsed",
    "saved",
]


def check_upload_size(document_bytes: bytes, max_upload_bytes: int | None = None) -> None:
    """
    Reject documents over the upload limit before they reach OCR.

    Raises:
        UploadTooLarge: If the document exceeds the limit
    """
    limit = get_settings().max_upload_bytes if max_upload_bytes is None else max_upload_bytes
    if len(document_bytes) > limit:
        raise UploadTooLarge(len(document_bytes), limit)


def extract_document_lines(
    document_bytes: bytes,
    gateway: TextractGateway,
    max_upload_bytes: int | None = None,
) -> list[str]:
    """Size-check, normalize and OCR a document into text lines."""
    check_upload_size(document_bytes, max_upload_bytes)
    return gateway.extract_lines(prepare_document_bytes(document_bytes))


def log_parsed_receipt(receipt: Receipt) -> None:
    logger.info("=== PARSING COMPLETE ===")
    logger.info("Company: %s", receipt.company_name)
    logger.info("Branch: %s", receipt.branch)
    logger.info("Manager: %s", receipt.manager_name)
    logger.info("Cashier: %s", receipt.cashier_number)
    logger.info("Items: %d", len(receipt.items))
    for item in receipt.items:
        logger.debug("Item: %s x%d = $%s", item.product_name, item.quantity, item.price)
    logger.info("SubTotal: $%s", receipt.sub_total)
    logger.info("Cash: $%s", receipt.cash)
    logger.info("Change: $%s", receipt.change_amount)


def process_document(
    document_bytes: bytes,
    gateway: TextractGateway,
    store: ReceiptStore | None = None,
    max_upload_bytes: int | None = None,
) -> Receipt:
    """
    Run OCR -> parse -> optional save for one document.

    OCR and size errors propagate unchanged; parsing itself never fails.

    Returns:
        The parsed receipt, carrying its id when a store was given
    """
    lines = extract_document_lines(document_bytes, gateway, max_upload_bytes)
    receipt = parse_receipt_lines(lines)
    log_parsed_receipt(receipt)
    if store is None:
        return receipt
    return store.save(receipt)


@dataclass(frozen=True)
class ReceiptScanRequest:
    """Inputs for running receipt scan workflow."""

    document_path: Path
    gateway: TextractGateway
    store: ReceiptStore | None = None


@dataclass(frozen=True)
class ReceiptScanResult:
    """Outcome from receipt scan workflow."""

    status: ScanStatus
    receipt: Receipt | None = None
    error: str | None = None


def run_receipt_scan(request: ReceiptScanRequest) -> ReceiptScanResult:
    """Run scan flow for a local file: read -> OCR -> parse -> optional save."""
    if not request.document_path.exists():
        return ReceiptScanResult(
            status="file_not_found",
            error=f"Receipt file not found: {request.document_path}",
        )

    logger.info("Processing receipt image: %s", request.document_path.name)
    document_bytes = request.document_path.read_bytes()

    try:
        receipt = process_document(document_bytes, request.gateway, request.store)
    except UploadTooLarge as exc:
        return ReceiptScanResult(status="file_too_large", error=str(exc))
    except TextractError as exc:
        return ReceiptScanResult(status="ocr_unavailable", error=str(exc))

    return ReceiptScanResult(
        status="saved" if request.store is not None else "parsed",
        receipt=receipt,
    )


def run_parse_lines_file(lines_path: Path) -> Receipt:
    """Parse a text file holding one OCR line per row, without calling OCR."""
    lines = lines_path.read_text(encoding="utf-8").splitlines()
    receipt = parse_receipt_lines(lines)
    log_parsed_receipt(receipt)
    return receipt
