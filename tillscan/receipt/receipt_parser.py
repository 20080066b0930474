"""Parse OCR text lines into structured Receipt data."""

from collections.abc import Sequence

from tillscan.domain.receipt import (
    DEFAULT_AMOUNT,
    DEFAULT_BRANCH,
    DEFAULT_CASHIER_NUMBER,
    DEFAULT_COMPANY_NAME,
    DEFAULT_MANAGER_NAME,
    Receipt,
    ReceiptItem,
)

from .line_parser import (
    FinancialTotals,
    HeaderFields,
    _extract_financial_totals,
    _extract_header_fields,
    _extract_items,
    _normalize_lines,
)


def parse_receipt_lines(lines: Sequence[str] | None) -> Receipt:
    """
    Parse OCR lines into a Receipt object.

    This is a best-effort parser: it never raises on odd input and fills any
    field it cannot find with a placeholder.

    Args:
        lines: OCR text lines in top-to-bottom reading order

    Returns:
        Receipt with every field populated and ``id`` unset
    """
    normalized = _normalize_lines(lines)

    header = _extract_header_fields(normalized)
    items = _extract_items(normalized)
    totals = _extract_financial_totals(normalized)

    return apply_defaults(header, items, totals)


def apply_defaults(header: HeaderFields, items: list[ReceiptItem], totals: FinancialTotals) -> Receipt:
    """Build a Receipt, substituting placeholders for undetected fields."""
    return Receipt(
        company_name=header.company_name or DEFAULT_COMPANY_NAME,
        branch=header.branch or DEFAULT_BRANCH,
        manager_name=header.manager_name or DEFAULT_MANAGER_NAME,
        cashier_number=header.cashier_number or DEFAULT_CASHIER_NUMBER,
        items=list(items),
        sub_total=DEFAULT_AMOUNT if totals.sub_total is None else totals.sub_total,
        cash=DEFAULT_AMOUNT if totals.cash is None else totals.cash,
        change_amount=DEFAULT_AMOUNT if totals.change_amount is None else totals.change_amount,
    )
